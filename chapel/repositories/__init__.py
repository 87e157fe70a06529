# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the SQL repositories."""
from chapel.repositories.history_repository import HistoryRepository
from chapel.repositories.member_repository import MemberRepository
from chapel.repositories.tracking_repository import TrackingRepository

__all__ = ["HistoryRepository", "MemberRepository", "TrackingRepository"]
