"""
Base Service Interface

Defines the abstract interface for schedule services and the
standard result wrapper they return.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Generic, TypeVar, Union
from dataclasses import dataclass

from models.schedule import MonthlySchedule


T = TypeVar('T')


@dataclass
class ServiceResult(Generic[T]):
    """Standard service response wrapper"""
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def ok(cls, data: T, metadata: Dict[str, Any] = None) -> 'ServiceResult[T]':
        """Create successful result"""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(cls, error: str, metadata: Dict[str, Any] = None) -> 'ServiceResult[T]':
        """Create failure result"""
        return cls(success=False, error=error, metadata=metadata)


class IScheduleService(ABC):
    """
    Abstract interface for schedule services

    Implemented by:
    - ScheduleService: Parses schedule detail documents handed to it
    """

    @abstractmethod
    def parse_document(
        self,
        html: Union[str, bytes]
    ) -> ServiceResult[MonthlySchedule]:
        """
        Parse a schedule detail document

        Args:
            html: Raw schedule detail page

        Returns:
            ServiceResult containing the MonthlySchedule
        """
        pass

    @abstractmethod
    def load_demo(self) -> ServiceResult[MonthlySchedule]:
        """Parse the bundled demonstration schedule"""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if service is configured and usable"""
        pass
