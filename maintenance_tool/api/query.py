"""Query API for inspecting the publish directory"""

from ..constants import SiteState
from ..models import SiteStatus, ToggleConfig
from ..utils.file_utils import calculate_file_checksum


def site_status(config: ToggleConfig) -> SiteStatus:
    """
    Report what the publish directory currently serves

    The state is observed, never recorded: the published default document
    is compared against the maintenance document by checksum.

    Args:
        config: Paths to inspect

    Returns:
        SiteStatus: MAINTENANCE, LIVE or EMPTY
    """
    status = SiteStatus(state=SiteState.EMPTY, publish_dir=config.publish_path)

    published = config.published_document_path
    if not published.is_file():
        return status

    status.document_checksum = calculate_file_checksum(published)

    if config.maintenance_document_path.is_file():
        status.maintenance_checksum = calculate_file_checksum(config.maintenance_document_path)

    if status.document_checksum == status.maintenance_checksum:
        status.state = SiteState.MAINTENANCE
    else:
        status.state = SiteState.LIVE

    return status
