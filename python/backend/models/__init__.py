from backend.models.board import Board, Direction, Position, Snapshot

__all__ = ["Board", "Direction", "Position", "Snapshot"]
