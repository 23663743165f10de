"""
File exporter for writing span events to JSONL files.
"""

import json
import logging
import os
import threading
from datetime import datetime
from typing import Any, Dict

from evt_tracer.exporters.base import BaseExporter

logger = logging.getLogger("evt_tracer.exporters.file")


class FileExporter(BaseExporter):
    """Writes span events to a JSONL file."""
    
    def __init__(self, file_path: str, rotate_size_mb: int = 100):
        """
        Initialize file exporter.
        
        Args:
            file_path: Path to the output file
            rotate_size_mb: Rotate file when it exceeds this size in MB
        """
        self.file_path = file_path
        self.rotate_size_mb = rotate_size_mb
        self._lock = threading.Lock()
    
    def export(self, event: Dict[str, Any]) -> bool:
        """Append event to file as JSON line."""
        try:
            with self._lock:
                # Check for rotation
                if os.path.exists(self.file_path):
                    size_mb = os.path.getsize(self.file_path) / (1024 * 1024)
                    if size_mb >= self.rotate_size_mb:
                        rotated = f"{self.file_path}.{datetime.now().strftime('%Y%m%d_%H%M%S')}"
                        os.rename(self.file_path, rotated)
                
                with open(self.file_path, "a") as f:
                    f.write(json.dumps(event, default=str) + "\n")
            return True
        except OSError as e:
            logger.error(f"File write error: {e}")
            return False
    
    def health_check(self) -> bool:
        """Check that the output directory is writable."""
        directory = os.path.dirname(os.path.abspath(self.file_path))
        return os.access(directory, os.W_OK)
