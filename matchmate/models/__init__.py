from .user import User, UserHobby
from .love_request import LoveRequest
from .gift import Gift
from .report import Report
