import hashlib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def format_score(score: int) -> str:
    """Render a score with thousands separators, e.g. 1,234,567."""
    return f"{score:,}"


class InstanceFingerprinter:
    """
    Pure logic for creating deterministic fingerprints of instance files.
    """

    @staticmethod
    def calculate(content: bytes) -> str:
        """
        Hash the raw instance bytes.
        Formula: SHA256(content)
        """
        return hashlib.sha256(content).hexdigest()

    @staticmethod
    def calculate_file(file_path: str) -> str:
        return InstanceFingerprinter.calculate(Path(file_path).read_bytes())
