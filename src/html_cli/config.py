"""
Configuration management for HTML CLI.

Handles loading and managing configuration from files, environment variables,
and command-line options.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Rendering defaults for open documents."""

    indent_size: int = 4
    show_id: bool = True
    tree_indent_size: int = 2
    use_symbols: bool = True


@dataclass
class SpellCheckConfig:
    """Settings for the LanguageTool spell check service."""

    enabled: bool = True
    api_url: str = "https://api.languagetool.org/v2/check"
    language: str = "auto"
    timeout: float = 10.0
    categories: List[str] = field(default_factory=lambda: ["Spelling", "Possible Typo"])
    max_suggestions: int = 10


@dataclass
class SessionConfig:
    """Where documents and session state live."""

    files_dir: Path = Path("files")
    state_dir: Path = Path(".temp")


@dataclass
class HtmlCLIConfig:
    """Main configuration for HTML CLI."""

    editor: EditorConfig = field(default_factory=EditorConfig)
    spell_check: SpellCheckConfig = field(default_factory=SpellCheckConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    log_level: str = "WARNING"


def _as_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes', 'on')


class ConfigManager:
    """Manages HTML CLI configuration from multiple sources."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / '.html-cli'
        self.config_file = self.config_dir / 'config.yaml'
        self._config: Optional[HtmlCLIConfig] = None

    def load_config(self) -> HtmlCLIConfig:
        """Load configuration from all sources."""
        if self._config:
            return self._config

        # Start with defaults
        config = HtmlCLIConfig()

        if self.config_file.exists():
            config = self._merge_configs(config, self._load_from_file())

        config = self._merge_configs(config, self._load_from_env())

        self._config = config
        return config

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r') as f:
                return yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load config file {self.config_file}: {e}")
            return {}

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        indent_size = os.getenv('HTML_CLI_INDENT_SIZE')
        if indent_size:
            try:
                env_config.setdefault('editor', {})['indent_size'] = int(indent_size)
            except ValueError:
                logger.warning(f"Ignoring invalid HTML_CLI_INDENT_SIZE: {indent_size!r}")

        show_id = os.getenv('HTML_CLI_SHOW_ID')
        if show_id:
            env_config.setdefault('editor', {})['show_id'] = _as_bool(show_id)

        spell_check = os.getenv('HTML_CLI_SPELL_CHECK')
        if spell_check:
            env_config.setdefault('spell_check', {})['enabled'] = _as_bool(spell_check)

        api_url = os.getenv('HTML_CLI_SPELL_CHECK_URL')
        if api_url:
            env_config.setdefault('spell_check', {})['api_url'] = api_url

        language = os.getenv('HTML_CLI_LANGUAGE')
        if language:
            env_config.setdefault('spell_check', {})['language'] = language

        files_dir = os.getenv('HTML_CLI_FILES_DIR')
        if files_dir:
            env_config.setdefault('session', {})['files_dir'] = files_dir

        log_level = os.getenv('HTML_CLI_LOG_LEVEL')
        if log_level:
            env_config['log_level'] = log_level.upper()

        return env_config

    def _merge_configs(self, base: HtmlCLIConfig, override: Dict[str, Any]) -> HtmlCLIConfig:
        """Merge a configuration dictionary onto ``base``."""
        if 'editor' in override:
            editor_overrides = override['editor']
            for key in ('indent_size', 'tree_indent_size'):
                if key in editor_overrides:
                    setattr(base.editor, key, int(editor_overrides[key]))
            for key in ('show_id', 'use_symbols'):
                if key in editor_overrides:
                    setattr(base.editor, key, bool(editor_overrides[key]))

        if 'spell_check' in override:
            spell_overrides = override['spell_check']
            if 'enabled' in spell_overrides:
                base.spell_check.enabled = bool(spell_overrides['enabled'])
            if 'api_url' in spell_overrides:
                base.spell_check.api_url = str(spell_overrides['api_url'])
            if 'language' in spell_overrides:
                base.spell_check.language = str(spell_overrides['language'])
            if 'timeout' in spell_overrides:
                base.spell_check.timeout = float(spell_overrides['timeout'])
            if 'categories' in spell_overrides:
                base.spell_check.categories = list(spell_overrides['categories'])
            if 'max_suggestions' in spell_overrides:
                base.spell_check.max_suggestions = int(spell_overrides['max_suggestions'])

        if 'session' in override:
            session_overrides = override['session']
            if 'files_dir' in session_overrides:
                base.session.files_dir = Path(session_overrides['files_dir'])
            if 'state_dir' in session_overrides:
                base.session.state_dir = Path(session_overrides['state_dir'])

        if 'log_level' in override:
            base.log_level = str(override['log_level']).upper()

        return base

    def save_config(self, config: HtmlCLIConfig) -> None:
        """Save configuration to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        config_dict = {
            'editor': {
                'indent_size': config.editor.indent_size,
                'show_id': config.editor.show_id,
                'tree_indent_size': config.editor.tree_indent_size,
                'use_symbols': config.editor.use_symbols,
            },
            'spell_check': {
                'enabled': config.spell_check.enabled,
                'api_url': config.spell_check.api_url,
                'language': config.spell_check.language,
                'timeout': config.spell_check.timeout,
                'categories': list(config.spell_check.categories),
                'max_suggestions': config.spell_check.max_suggestions,
            },
            'session': {
                'files_dir': str(config.session.files_dir),
                'state_dir': str(config.session.state_dir),
            },
            'log_level': config.log_level,
        }

        with open(self.config_file, 'w') as f:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    def create_default_config(self) -> Path:
        """Create a default configuration file and return its path."""
        self.save_config(HtmlCLIConfig())
        return self.config_file

    def get_config_info(self) -> Dict[str, Any]:
        """Get information about current configuration."""
        config = self.load_config()

        return {
            'config_file': str(self.config_file),
            'config_exists': self.config_file.exists(),
            'indent_size': config.editor.indent_size,
            'show_id': config.editor.show_id,
            'spell_check_enabled': config.spell_check.enabled,
            'spell_check_url': config.spell_check.api_url,
            'files_dir': str(config.session.files_dir),
        }


# Global config manager instance
_config_manager: Optional[ConfigManager] = None

def get_config_manager() -> ConfigManager:
    """Get the global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager

def load_config() -> HtmlCLIConfig:
    """Load the current configuration."""
    return get_config_manager().load_config()
