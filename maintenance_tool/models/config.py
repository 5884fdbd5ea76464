"""Configuration data models"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..constants import (
    DEFAULT_BUILD_COMMAND,
    DEFAULT_DEPLOY_COMMAND,
    DEFAULT_DOCUMENT_NAME,
    DEFAULT_ICON,
    DEFAULT_ICON_NAME,
    DEFAULT_MAINTENANCE_DOCUMENT,
    DEFAULT_NOTIFICATION_BODY,
    DEFAULT_NOTIFICATION_ICON,
    DEFAULT_NOTIFICATION_TITLE,
    DEFAULT_PUBLISH_DIR,
)


@dataclass
class NotificationDefaults:
    """Fallback values for push notifications"""

    title: str = DEFAULT_NOTIFICATION_TITLE
    body: str = DEFAULT_NOTIFICATION_BODY
    icon: str = DEFAULT_NOTIFICATION_ICON

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "title": self.title,
            "body": self.body,
            "icon": self.icon,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NotificationDefaults':
        """Create from dictionary"""
        _check_keys("notification", data, {f.name for f in fields(cls)})
        return cls(**{k: _require_str(f"notification.{k}", v) for k, v in data.items()})


@dataclass
class ToggleConfig:
    """Everything the enable and restore operations need to know

    Relative paths are resolved against ``project_root``.
    """

    project_root: Path = field(default_factory=Path.cwd)
    maintenance_document: str = DEFAULT_MAINTENANCE_DOCUMENT
    icon: str = DEFAULT_ICON
    publish_dir: str = DEFAULT_PUBLISH_DIR
    default_document_name: str = DEFAULT_DOCUMENT_NAME
    icon_name: str = DEFAULT_ICON_NAME
    build_command: str = DEFAULT_BUILD_COMMAND
    deploy_command: str = DEFAULT_DEPLOY_COMMAND
    notification: NotificationDefaults = field(default_factory=NotificationDefaults)

    def __post_init__(self):
        """Validate configuration"""
        self.project_root = Path(self.project_root)

        for name in ("default_document_name", "icon_name"):
            value = getattr(self, name)
            if not value or Path(value).name != value:
                raise ValueError(f"'{name}' must be a plain file name, got: {value!r}")

        if self.default_document_name == self.icon_name:
            raise ValueError(
                f"'default_document_name' and 'icon_name' must differ, both are {self.icon_name!r}"
            )

        for name in ("build_command", "deploy_command"):
            if not getattr(self, name).strip():
                raise ValueError(f"'{name}' must not be empty")

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root"""
        path = Path(path)
        if path.is_absolute():
            return path
        return self.project_root / path

    @property
    def maintenance_document_path(self) -> Path:
        return self.resolve(self.maintenance_document)

    @property
    def icon_path(self) -> Path:
        return self.resolve(self.icon)

    @property
    def publish_path(self) -> Path:
        return self.resolve(self.publish_dir)

    @property
    def published_document_path(self) -> Path:
        return self.publish_path / self.default_document_name

    @property
    def published_icon_path(self) -> Path:
        return self.publish_path / self.icon_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (project_root is implied by file location)"""
        return {
            "maintenance": {
                "document": self.maintenance_document,
                "icon": self.icon,
            },
            "publish": {
                "directory": self.publish_dir,
                "document_name": self.default_document_name,
                "icon_name": self.icon_name,
            },
            "commands": {
                "build": self.build_command,
                "deploy": self.deploy_command,
            },
            "notification": self.notification.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]],
                  project_root: Optional[Path] = None) -> 'ToggleConfig':
        """Create from the dictionary layout produced by ``to_dict``"""
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping")

        _check_keys("config", data, {"version", "maintenance", "publish", "commands", "notification"})

        maintenance = _section(data, "maintenance", {"document", "icon"})
        publish = _section(data, "publish", {"directory", "document_name", "icon_name"})
        commands = _section(data, "commands", {"build", "deploy"})

        kwargs: Dict[str, Any] = {}
        if project_root is not None:
            kwargs["project_root"] = Path(project_root)

        mapping = [
            ("maintenance_document", maintenance, "document"),
            ("icon", maintenance, "icon"),
            ("publish_dir", publish, "directory"),
            ("default_document_name", publish, "document_name"),
            ("icon_name", publish, "icon_name"),
            ("build_command", commands, "build"),
            ("deploy_command", commands, "deploy"),
        ]
        for attr, section, key in mapping:
            if key in section:
                kwargs[attr] = _require_str(key, section[key])

        if data.get("notification") is not None:
            notification = data["notification"]
            if not isinstance(notification, dict):
                raise ValueError("'notification' must be a mapping")
            kwargs["notification"] = NotificationDefaults.from_dict(notification)

        return cls(**kwargs)


def _section(data: Dict[str, Any], name: str, allowed: set) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping")
    _check_keys(name, section, allowed)
    return section


def _check_keys(name: str, data: Dict[str, Any], allowed: set) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValueError(f"Unknown key(s) in '{name}': {', '.join(unknown)}")


def _require_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value
