"""Training package.

This package provides the BPE training loop and its configuration.
"""

from .config import TrainingConfig
from .trainer import select_pair, train

__all__ = ['TrainingConfig', 'select_pair', 'train']
