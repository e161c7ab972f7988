"""Recording repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict

from ..entities.recording import Recording
from ..value_objects.entity_ids import RecordingId, PoemId


class IRecordingRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List[Recording]:
        pass

    @abstractmethod
    async def list_by_poem(self, poem_id: PoemId) -> List[Recording]:
        pass

    @abstractmethod
    async def get_by_id(self, recording_id: RecordingId) -> Optional[Recording]:
        pass

    @abstractmethod
    async def add(self, recording: Recording) -> Recording:
        pass

    @abstractmethod
    async def delete(self, recording_id: RecordingId) -> bool:
        pass

    @abstractmethod
    async def count_by_poem(self) -> Dict[PoemId, int]:
        pass
