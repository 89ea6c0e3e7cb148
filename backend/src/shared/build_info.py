import platform
from dataclasses import dataclass

from shared.config import Settings


@dataclass(frozen=True)
class BuildInfo:
    """Build metadata stamped into the image; fixed for the process lifetime."""

    version: str
    revision: str
    branch: str
    build_user: str
    build_date: str
    python_version: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "BuildInfo":
        return cls(
            version=settings.BUILD_VERSION,
            revision=settings.BUILD_REVISION,
            branch=settings.BUILD_BRANCH,
            build_user=settings.BUILD_USER,
            build_date=settings.BUILD_DATE,
            python_version=platform.python_version(),
        )

    def as_dict(self) -> dict[str, str]:
        return {
            "Version": self.version,
            "Revision": self.revision,
            "Branch": self.branch,
            "Built By": self.build_user,
            "Build Date": self.build_date,
            "Python Version": self.python_version,
        }
