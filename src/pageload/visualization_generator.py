"""Generates visualizations from page load samples."""
import logging
from pathlib import Path
from typing import List, Union
import numpy as np
import matplotlib.pyplot as plt

from .models import Sample


# Configure logging
logger = logging.getLogger(__name__)


class VisualizationGenerator:
    """Generates visualizations from page load samples."""

    def plot_load_times(self, samples: List[Sample], output_path: Union[Path, str]) -> None:
        """
        Plot load time and LCP per sample next to a load time histogram.

        Args:
            samples: Samples of the run in collection order.
            output_path: Path to save the PNG.
        """
        if not samples:
            logger.warning("No samples available. Skipping plot.")
            return

        x = np.arange(1, len(samples) + 1)
        load_times = [s.load_time for s in samples]
        lcp_times = [s.largest_contentful_paint for s in samples]

        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(15, 6))

        ax1.plot(x, load_times, label="Load time", marker='o', linestyle='-')
        if any(lcp_times):
            ax1.plot(x, lcp_times, label="LCP", marker='s', linestyle='--')

        # Mark session boundaries
        for i in range(1, len(samples)):
            if samples[i].session_id != samples[i - 1].session_id:
                ax1.axvline(i + 0.5, color='grey', linestyle=':', alpha=0.7)

        ax1.set_title("Per-sample timings")
        ax1.set_xlabel("Sample")
        ax1.set_ylabel("Time (ms)")
        ax1.legend()
        ax1.grid(True, alpha=0.3)

        ax2.hist(load_times, bins=min(len(load_times), 20), color='#1f77b4', edgecolor='white')
        ax2.axvline(float(np.mean(load_times)), color='black', linestyle='--', alpha=0.7, label="Mean")
        ax2.set_title("Load time distribution")
        ax2.set_xlabel("Load time (ms)")
        ax2.set_ylabel("Samples")
        ax2.legend()

        plt.tight_layout()
        plt.savefig(output_path)
        plt.close(fig)
        logger.info(f"Graph saved: {output_path}")
