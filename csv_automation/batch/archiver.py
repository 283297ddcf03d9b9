"""
Archive consumed input files.
"""

import shutil
from pathlib import Path

from csv_automation.observability import metrics
from csv_automation.observability.logger import get_logger


logger = get_logger(__name__)


def archive_files(
    files: list[str | Path],
    input_dir: str | Path,
    archive_dir_name: str = "archive",
) -> list[str]:
    """
    Move input files into ``<input_dir>/<archive_dir_name>``, keeping their names.

    Destinations are checked before anything moves, so a name clash with
    an earlier archived file leaves every input in place.

    Args:
        files: Input files consumed by the run
        input_dir: Input directory
        archive_dir_name: Archive subdirectory name

    Returns:
        Names of the archived files, in order

    Raises:
        FileExistsError: If an archived file with the same name already exists
        OSError: If the archive directory cannot be created or a move fails
    """
    archive_dir = Path(input_dir) / archive_dir_name
    archive_dir.mkdir(parents=True, exist_ok=True)

    sources = [Path(f) for f in files]
    for source in sources:
        destination = archive_dir / source.name
        if destination.exists():
            raise FileExistsError(f"Archive already contains {source.name}: {destination}")

    archived = []
    for source in sources:
        shutil.move(str(source), str(archive_dir / source.name))
        archived.append(source.name)
        logger.info(f"Archived {source.name}", extra={"archive_dir": str(archive_dir)})

    metrics.increment_counter(metrics.files_archived_total, len(archived))
    return archived
