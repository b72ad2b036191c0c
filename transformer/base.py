"""Abstract base class for schedule transformers."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from roster.models import DutyEvent


class BaseTransformer(ABC):
    """Abstract base class defining the interface for schedule transformers.
    
    Extend this class to implement transformers for other output formats
    (e.g., CSV, JSON, a calendar API payload).
    """
    
    @abstractmethod
    def transform(self, events: Sequence[DutyEvent]) -> Any:
        """Transform duty events into the target format.
        
        Args:
            events: Generated duty events, already in output order.
            
        Returns:
            Transformed data in the target format.
        """
        pass
    
    @abstractmethod
    def save(self, output_path: str) -> None:
        """Save the transformed data to a file.
        
        Args:
            output_path: Path to the output file.
        """
        pass
