#!/usr/bin/env python3
"""
LPC analysis of a synthetic frame.

Builds a two-tone test frame, runs window -> autocorrelation ->
Levinson-Durbin -> bandwidth expansion with the settings of a YAML config,
and prints the coefficients. Optionally repairs an LSF vector given on the
command line.

Usage:
    python scripts/analyze_frame.py [--config CONFIG_PATH] [--lsf 0.3,0.31,...]
"""

import sys
import argparse
import logging
from pathlib import Path

import numpy as np

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from lpc_frontend import LPCAnalyzer, load_config
from lpc_frontend.lpc_core import is_stable, min_lsf_gap
from lpc_frontend.utils import setup_logging, log_config, log_analysis

console = Console()


def two_tone_frame(n: int, sr: int = 8000, f1: float = 440.0, f2: float = 1250.0) -> np.ndarray:
    t = np.arange(n) / sr
    return np.sin(2 * np.pi * f1 * t) + 0.5 * np.sin(2 * np.pi * f2 * t)


def run_analysis(config_path: str, lsf_arg: str = None, log_file: str = None):
    logger = setup_logging(level=logging.DEBUG, log_file=log_file)

    config = load_config(config_path)
    analyzer = LPCAnalyzer(config)
    logger.info(f"Loaded config from {config_path}")
    log_config(logger, config.to_dict())

    console.print(Panel.fit(
        "[bold blue]LPC Front End - Frame Analysis[/bold blue]\n"
        f"Order: {config.order} | Frame: {config.frame_length} | Chirp: {config.chirp}",
        border_style="blue"
    ))

    frame = two_tone_frame(config.frame_length)
    result = analyzer.analyze(frame, analysis_window=np.hanning(config.frame_length))
    log_analysis(logger, result)

    table = Table(title="LPC Coefficients", box=box.ROUNDED)
    table.add_column("i", justify="right", style="bold")
    table.add_column("a[i]", justify="right")
    table.add_column("a_bw[i]", justify="right")
    table.add_column("k[i]", justify="right")

    for i in range(config.order + 1):
        k_str = f"{result.reflection[i - 1]:+.6f}" if i > 0 else "-"
        table.add_row(str(i), f"{result.lpc[i]:+.6f}", f"{result.lpc_expanded[i]:+.6f}", k_str)
    console.print(table)

    stable = is_stable(result.reflection)
    status = "[green]stable[/green]" if stable else "[red]unstable[/red]"
    console.print(f"Energy r[0] = {result.autocorr[0]:.4f} | Filter: {status}")

    if lsf_arg:
        lsf = np.array([float(v) for v in lsf_arg.split(',')])
        before = min_lsf_gap(lsf)
        changed = analyzer.stabilize(lsf)
        console.print(
            f"\nLSF guard: changed={changed} | min gap {before:.4f} -> {min_lsf_gap(lsf):.4f}"
        )
        console.print(f"Repaired LSF: {np.array2string(lsf, precision=4)}")
        if min_lsf_gap(lsf) < config.lsf_min_gap:
            logger.warning(f"LSF vector still violates the minimum gap after {config.lsf_n_passes} passes")

    return result


def main():
    parser = argparse.ArgumentParser(description="LPC analysis of a synthetic two-tone frame")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'configs' / 'default.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument(
        '--lsf',
        type=str,
        default=None,
        help='Comma-separated LSF vector to run through the stability guard'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Optional log file'
    )
    args = parser.parse_args()

    try:
        run_analysis(args.config, args.lsf, args.log_file)
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise


if __name__ == '__main__':
    main()
