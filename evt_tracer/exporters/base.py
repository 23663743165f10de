"""
Base exporter interface for all event sinks.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseExporter(ABC):
    """Abstract base class for all exporters."""
    
    @abstractmethod
    def export(self, event: Dict[str, Any]) -> bool:
        """
        Export a single span event.
        
        Args:
            event: Event record emitted by ``Span.log``
            
        Returns:
            bool: True if export was successful
        """
        pass
    
    def start(self) -> None:
        """Start the exporter."""
        pass
    
    def stop(self) -> None:
        """Stop the exporter."""
        pass
    
    def flush(self) -> None:
        """Flush anything the underlying sink holds."""
        pass
    
    def health_check(self) -> bool:
        """
        Check if the exporter is healthy.
        
        Returns:
            bool: True if the exporter is healthy
        """
        return True
