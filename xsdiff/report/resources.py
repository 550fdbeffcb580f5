"""
Static assets shared by all HTML reports of a run.
"""

import logging
import shutil
from pathlib import Path

from xsdiff.exceptions import ResourceMissing
from xsdiff.util.files import ensure_dir

logger = logging.getLogger(__name__)

RESOURCE_ROOT = Path(__file__).parent.parent / "templates" / "report"

# Relative to RESOURCE_ROOT and to the report folder
HTML_RESOURCES = (
    "css/xsdiff.css",
    "js/xsdiff.js",
)


class ResourceBundler:
    """Copies the fixed set of HTML assets into a report folder."""

    def __init__(self, resource_root: Path = RESOURCE_ROOT, resources: tuple[str, ...] = HTML_RESOURCES):
        self.resource_root = Path(resource_root)
        self.resources = resources

    def bundle(self, report_dir: Path) -> list[Path]:
        """
        Copy every resource into `report_dir`, keeping its sub-folder.

        Returns:
            Paths of the copied files

        Raises:
            ResourceMissing: If a resource is not shipped with the package
        """
        logger.info(f"html: write {len(self.resources)} resources")
        written = []
        for res in self.resources:
            source = self.resource_root / res
            if not source.is_file():
                raise ResourceMissing(res)

            target = Path(report_dir) / res
            ensure_dir(target.parent)
            shutil.copy2(source, target)
            written.append(target)
        return written
