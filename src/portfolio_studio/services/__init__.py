"""Services"""

from portfolio_studio.services.portfolio_editing import (
    SlugConflictError,
    UnknownTemplateError,
    apply_portfolio_updates,
    create_user_portfolio,
)
from portfolio_studio.services.versioning import (
    SnapshotPayloadError,
    create_snapshot,
    list_snapshots,
    revert_to_version,
)

__all__ = [
    "SlugConflictError",
    "SnapshotPayloadError",
    "UnknownTemplateError",
    "apply_portfolio_updates",
    "create_snapshot",
    "create_user_portfolio",
    "list_snapshots",
    "revert_to_version",
]
