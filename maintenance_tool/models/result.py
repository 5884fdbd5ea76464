"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..constants import SiteState


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    IN_PROGRESS = "in_progress"


class RestoreStatus(Enum):
    """Outcome of a restore run"""
    SUCCESS = "success"
    BUILD_FAILED = "build_failed"
    DEPLOY_FAILED = "deploy_failed"


@dataclass
class CommandResult:
    """Outcome of one external command"""

    command: str
    returncode: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    duration: float = 0.0

    @property
    def is_success(self) -> bool:
        return self.returncode == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "command": self.command,
            "returncode": self.returncode,
            "duration": self.duration,
        }
        if self.stdout is not None:
            data["stdout"] = self.stdout
        if self.stderr is not None:
            data["stderr"] = self.stderr
        return data


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.now()
        if status:
            self.status = status


@dataclass
class EnableResult(Result):
    """Result of installing the maintenance bundle"""

    publish_dir: Optional[Path] = None
    installed: Dict[str, Path] = field(default_factory=dict)
    checksums: Dict[str, str] = field(default_factory=dict)
    removed: List[Path] = field(default_factory=list)
    deploy: Optional[CommandResult] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "status": self.status.value,
            "message": self.message,
            "publish_dir": str(self.publish_dir) if self.publish_dir else None,
            "installed": {name: str(path) for name, path in self.installed.items()},
            "checksums": dict(self.checksums),
            "removed": [str(p) for p in self.removed],
            "duration": self.duration,
        }
        if self.deploy:
            data["deploy"] = self.deploy.to_dict()
        return data


@dataclass
class RestoreResult:
    """Result of rebuilding and redeploying the application"""

    status: RestoreStatus
    build: Optional[CommandResult] = None
    deploy: Optional[CommandResult] = None
    error: Optional[str] = None
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        return self.status == RestoreStatus.SUCCESS

    @property
    def exit_code(self) -> int:
        """Process exit status for this outcome"""
        return 0 if self.is_success else 1

    def complete(self, status: Optional[RestoreStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.now()
        if status:
            self.status = status

    @property
    def duration(self) -> Optional[float]:
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "status": self.status.value,
            "duration": self.duration,
        }
        if self.build:
            data["build"] = self.build.to_dict()
        if self.deploy:
            data["deploy"] = self.deploy.to_dict()
        if self.error:
            data["error"] = self.error
        return data


@dataclass
class SiteStatus:
    """Observed state of the publish directory"""

    state: SiteState
    publish_dir: Path
    document_checksum: Optional[str] = None
    maintenance_checksum: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "publish_dir": str(self.publish_dir),
            "document_checksum": self.document_checksum,
            "maintenance_checksum": self.maintenance_checksum,
        }
