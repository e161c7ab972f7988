"""Infrastructure ORM Models"""

from .user_model import UserModel
from .poem_model import PoemModel
from .submission_model import SubmissionModel
from .recording_model import RecordingModel
from .favorite_model import FavoriteRecordingModel, FavoritePoemModel, FavoritePoetModel

__all__ = [
    'UserModel',
    'PoemModel',
    'SubmissionModel',
    'RecordingModel',
    'FavoriteRecordingModel',
    'FavoritePoemModel',
    'FavoritePoetModel',
]
