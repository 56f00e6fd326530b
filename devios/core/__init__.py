"""
DeviOS Core Module

Core terminal components including:
- Scripted Sequencer
- Configuration Loader
"""

from .sequencer import Sequencer, Chain, ChainStep, ArmedStep
from .config_loader import (
    ConfigLoader,
    Config,
    TerminalConfig,
    AuthConfig,
    LocaleConfig,
    SequencerConfig,
    LoggingConfig,
    ShellConfig,
    get_config
)

__all__ = [
    # Sequencer
    'Sequencer',
    'Chain',
    'ChainStep',
    'ArmedStep',
    # Configuration
    'ConfigLoader',
    'Config',
    'TerminalConfig',
    'AuthConfig',
    'LocaleConfig',
    'SequencerConfig',
    'LoggingConfig',
    'ShellConfig',
    'get_config',
]
