"""Operator profile and division repositories."""


from gatequeue.domain.directory import Division, UserProfile
from gatequeue.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserProfile]):
    model = UserProfile


class DivisionRepository(BaseRepository[Division]):
    model = Division
