import os
from dataclasses import dataclass
from typing import Literal, Optional

from .filtering import KVFilterConfig, RuleSet

FormatterType = Literal["json", "plain"]
OutputType = Literal["console", "file", "both"]


@dataclass
class LoggerConfig:
    """Configuration for filtered loggers"""

    log_level: str = "INFO"
    include_timestamp: bool = True
    formatter_type: FormatterType = "json"
    output_type: OutputType = "console"
    filename: str = "app.log"
    kv_filter: Optional[KVFilterConfig] = None

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def _parse_rules_env(cls, key: str) -> Optional[RuleSet]:
        """Parse a ``key=v1|v2;other=v3`` rule string; unset or blank means no rules"""
        text = os.getenv(key, "").strip()
        if not text:
            return None
        return RuleSet.parse(text)

    @classmethod
    def _create_kv_filter_from_env(cls) -> Optional[KVFilterConfig]:
        """Create key/value filter configuration from environment variables"""
        if not cls._parse_bool_env("KVFILTER_ENABLED"):
            return None

        return KVFilterConfig(
            threshold=os.getenv("KVFILTER_THRESHOLD", "INFO"),
            allow_rules=cls._parse_rules_env("KVFILTER_ALLOW"),
            deny_rules=cls._parse_rules_env("KVFILTER_DENY"),
            collect_metrics=cls._parse_bool_env("KVFILTER_COLLECT_METRICS", "true"),
        )

    @classmethod
    def from_env(cls) -> "LoggerConfig":
        """Create configuration from environment variables"""
        formatter_type = os.getenv("KVFILTER_FORMATTER", "json").lower()
        if formatter_type not in ["json", "plain"]:
            formatter_type = "json"

        output_type = os.getenv("KVFILTER_OUTPUT", "console").lower()
        if output_type not in ["console", "file", "both"]:
            output_type = "console"

        return cls(
            log_level=os.getenv("KVFILTER_LOG_LEVEL", "INFO"),
            include_timestamp=cls._parse_bool_env("KVFILTER_TIMESTAMP", "true"),
            formatter_type=formatter_type,
            output_type=output_type,
            filename=os.getenv("KVFILTER_FILENAME", "app.log"),
            kv_filter=cls._create_kv_filter_from_env(),
        )


_default_config: Optional[LoggerConfig] = None


def get_default_config() -> LoggerConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = LoggerConfig.from_env()
    return _default_config


def set_default_config(config: LoggerConfig) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
