"""
Tests for the LPC analysis pipeline and the configured analyzer.

Run:
    pytest tests/test_analysis.py -v
"""

import sys
import os
import logging

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest

from lpc_frontend import analyze_frame, LPCAnalyzer, LPCConfig
from lpc_frontend.lpc_core import autocorrelation, levinson_durbin


def two_tone_frame(n: int = 240, sr: int = 8000) -> np.ndarray:
    t = np.arange(n) / sr
    return np.sin(2 * np.pi * 440.0 * t) + 0.5 * np.sin(2 * np.pi * 1250.0 * t)


class TestAnalyzeFrame:

    def test_reproducible(self):
        frame = two_tone_frame()
        win = np.hanning(240)

        first = analyze_frame(frame, 10, analysis_window=win, chirp=0.9025)
        second = analyze_frame(frame.copy(), 10, analysis_window=win.copy(), chirp=0.9025)

        print(f"\n[Pipeline] a_bw = {np.array2string(first.lpc_expanded, precision=5)}")
        assert np.array_equal(first.lpc_expanded, second.lpc_expanded)
        assert np.array_equal(first.reflection, second.reflection)

    def test_golden_impulse_pair_frame(self):
        # x = [1, 0.5, 0, ..., 0] has r = [1.25, 0.5, 0, ...], whose order-10
        # predictor is a_j = (-1)**j * (2**(22-j) - 2**j) / (2**22 - 1)
        frame = np.zeros(240)
        frame[0] = 1.0
        frame[1] = 0.5

        result = analyze_frame(frame, 10, chirp=0.5)

        golden_lpc = np.array([
            4194303, -2097150, 1048572, -524280, 262128, -131040,
            65472, -32640, 16128, -7680, 3072,
        ]) / 4194303.0
        golden_expanded = np.array([
            4194303, -1048575, 262143, -65535, 16383, -4095,
            1023, -255, 63, -15, 3,
        ]) / 4194303.0
        golden_reflection = np.array([
            -6 / 15, 12 / 63, -24 / 255, 48 / 1023, -96 / 4095,
            192 / 16383, -384 / 65535, 768 / 262143, -1536 / 1048575, 3072 / 4194303,
        ])

        np.testing.assert_allclose(result.autocorr, [1.25, 0.5] + [0.0] * 9)
        np.testing.assert_allclose(result.lpc, golden_lpc, rtol=1e-12, atol=1e-14)
        np.testing.assert_allclose(result.reflection, golden_reflection, rtol=1e-12, atol=1e-14)
        np.testing.assert_allclose(result.lpc_expanded, golden_expanded, rtol=1e-12, atol=1e-14)

    def test_pipeline_stages(self):
        frame = two_tone_frame()
        win = np.hanning(240)

        result = analyze_frame(frame, 10, analysis_window=win, chirp=0.9)

        r = autocorrelation(frame * win, 10)
        np.testing.assert_allclose(result.autocorr, r)
        a, k = levinson_durbin(r)
        np.testing.assert_array_equal(result.lpc, a)
        np.testing.assert_array_equal(result.reflection, k)
        np.testing.assert_allclose(result.lpc_expanded, result.lpc * 0.9 ** np.arange(11), rtol=1e-12)
        assert result.lpc[0] == 1.0
        assert not result.degenerate

    def test_unit_lag_window_is_identity(self):
        frame = two_tone_frame()
        plain = analyze_frame(frame, 10)
        lagged = analyze_frame(frame, 10, lag_window=np.ones(11))
        assert np.array_equal(plain.lpc, lagged.lpc)

    def test_silent_frame(self, caplog):
        caplog.set_level(logging.DEBUG, logger='lpc_frontend.analysis')

        result = analyze_frame(np.zeros(240), 10, chirp=0.9)

        expected = np.zeros(11)
        expected[0] = 1.0
        assert result.degenerate
        assert np.array_equal(result.lpc, expected)
        assert np.array_equal(result.lpc_expanded, expected)
        assert np.array_equal(result.reflection, np.zeros(10))
        assert "below EPS" in caplog.text


class TestLPCAnalyzer:

    def test_analyze_uses_config(self):
        config = LPCConfig(order=8, split_dims=[4, 4], split_sizes=[16, 16])
        result = LPCAnalyzer(config).analyze(two_tone_frame())
        assert len(result.lpc) == 9
        assert len(result.reflection) == 8

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            LPCAnalyzer(LPCConfig(chirp=1.5))

    def test_stabilize_uses_pass_budget(self):
        table = np.array([[1.0, 1.0, 1.0, 1.0, 1.5, 2.0, 2.5, 2.8, 3.0, 3.1]])
        analyzer = LPCAnalyzer(LPCConfig(lsf_n_passes=0))
        assert analyzer.stabilize(table) is False

        analyzer = LPCAnalyzer(LPCConfig())
        assert analyzer.stabilize(table) is True

    def test_quantize_lsf(self):
        config = LPCConfig()
        rng = np.random.default_rng(8)
        codebook = rng.uniform(0.0, np.pi, config.codebook_length)
        lsf = np.linspace(0.2, 2.9, 10)

        indices, lsf_q = LPCAnalyzer(config).quantize_lsf(lsf, codebook)

        assert len(indices) == 3
        assert lsf_q.shape == (10,)
        for index, size in zip(indices, config.split_sizes):
            assert 0 <= index < size

    def test_quantize_lsf_wrong_codebook(self):
        with pytest.raises(ValueError, match="Codebook has"):
            LPCAnalyzer().quantize_lsf(np.linspace(0.2, 2.9, 10), np.zeros(10))
