"""Configuration handling for git-stales"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from git_stales.exceptions import ConfigurationError


class BranchScope(Enum):
    """Which branches to examine."""
    LOCAL = "local"
    REMOTE = "remote"
    BOTH = "both"

    @property
    def includes_local(self) -> bool:
        return self in (BranchScope.LOCAL, BranchScope.BOTH)

    @property
    def includes_remote(self) -> bool:
        return self in (BranchScope.REMOTE, BranchScope.BOTH)

    @classmethod
    def parse(cls, value: str) -> "BranchScope":
        """Parse a --branch-types value."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = [scope.value for scope in cls]
            raise ConfigurationError(f"branch types must be one of {allowed}, got '{value}'")


class Mode(Enum):
    """What to do with the stale branches that were found."""
    REPORT = "report"
    DRY_RUN = "dry-run"
    EXECUTE = "execute"


class AgeReference(Enum):
    """The point in time branch ages are measured from."""
    TRUNK = "trunk"  # trunk's last commit
    NOW = "now"  # wall clock

    @classmethod
    def parse(cls, value: str) -> "AgeReference":
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = [ref.value for ref in cls]
            raise ConfigurationError(f"age reference must be one of {allowed}, got '{value}'")


def resolve_mode(dry_run: bool = False, push_deletes: bool = False) -> Mode:
    """Turn the --dry-run / --push-deletes flags into a single Mode."""
    if dry_run and push_deletes:
        raise ConfigurationError("--dry-run and --push-deletes cannot be used together")
    if dry_run:
        return Mode.DRY_RUN
    if push_deletes:
        return Mode.EXECUTE
    return Mode.REPORT


@dataclass(frozen=True)
class Config:
    """Configuration for git-stales with validation.

    Instances are immutable; every component receives the same object.
    """

    # Branch filtering
    trunk_branch: str = "master"
    keep_patterns: Tuple[str, ...] = field(default_factory=tuple)
    branch_scope: BranchScope = BranchScope.BOTH

    # Stale branch threshold
    age_cutoff_days: int = 30
    age_reference: AgeReference = AgeReference.TRUNK

    # Execution
    mode: Mode = Mode.REPORT
    verbosity: int = 0
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        # Accept lists from callers, store a tuple
        object.__setattr__(self, "keep_patterns", tuple(self.keep_patterns))
        self._validate_age_cutoff()
        self._validate_trunk_branch()
        self._validate_branch_scope()
        self._validate_age_reference()
        self._validate_mode()
        self._validate_verbosity()

    def _validate_age_cutoff(self):
        if isinstance(self.age_cutoff_days, bool) or not isinstance(self.age_cutoff_days, int):
            raise ConfigurationError(f"age cutoff must be an integer, got {self.age_cutoff_days!r}")
        if self.age_cutoff_days < 1:
            raise ConfigurationError(
                f"age cutoff must be at least one day, got {self.age_cutoff_days}"
            )

    def _validate_trunk_branch(self):
        if not self.trunk_branch or not self.trunk_branch.strip():
            raise ConfigurationError("trunk branch cannot be empty")
        if self.trunk_branch != self.trunk_branch.strip():
            raise ConfigurationError(f"trunk branch has surrounding whitespace: {self.trunk_branch!r}")

    def _validate_branch_scope(self):
        if not isinstance(self.branch_scope, BranchScope):
            object.__setattr__(self, "branch_scope", BranchScope.parse(str(self.branch_scope)))

    def _validate_age_reference(self):
        if not isinstance(self.age_reference, AgeReference):
            object.__setattr__(self, "age_reference", AgeReference.parse(str(self.age_reference)))

    def _validate_mode(self):
        if not isinstance(self.mode, Mode):
            try:
                object.__setattr__(self, "mode", Mode(self.mode))
            except ValueError:
                allowed = [mode.value for mode in Mode]
                raise ConfigurationError(f"mode must be one of {allowed}, got '{self.mode}'")

    def _validate_verbosity(self):
        if self.verbosity < 0:
            raise ConfigurationError(f"verbosity cannot be negative, got {self.verbosity}")

    @property
    def protected_patterns(self) -> Tuple[str, ...]:
        """Keep patterns plus the ones that always protect the trunk.

        A remote-tracking trunk such as origin/master also protects master,
        since remote branches are matched by the part after the remote.
        """
        trunk_names = [self.trunk_branch]
        if "/" in self.trunk_branch:
            trunk_names.append(self.trunk_branch.split("/", 1)[1])
        return self.keep_patterns + tuple(f"^{re.escape(name)}$" for name in trunk_names)

    def to_dict(self) -> dict:
        """Convert config to a plain dictionary, e.g. for debug output."""
        return {
            "trunk_branch": self.trunk_branch,
            "keep_patterns": list(self.keep_patterns),
            "branch_scope": self.branch_scope.value,
            "age_cutoff_days": self.age_cutoff_days,
            "age_reference": self.age_reference.value,
            "mode": self.mode.value,
            "verbosity": self.verbosity,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "trunk_branch",
            "keep_patterns",
            "branch_scope",
            "age_cutoff_days",
            "age_reference",
            "mode",
            "verbosity",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
