"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from rankfile.core.coordinate import Coord
from rankfile.core.enums import Castling, Check, Color, PieceKind
from rankfile.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of a proposed or played move.

    Parsers fill in what their notation states: ICCF gives both squares,
    algebraic gives a destination plus the piece kind and optional
    disambiguation hints. ``Game.resolve_move`` completes the rest from the
    board (source square, moving piece, captured piece, check annotation).
    """

    to_move: Color
    from_coord: Coord | None = None
    to_coord: Coord | None = None
    piece: Piece | None = None
    piece_kind: PieceKind | None = None
    captured: Piece | None = None
    is_capture: bool = False
    promotion: PieceKind | None = None
    check: Check | None = None
    castling: Castling | None = None
    from_file: int | None = None
    from_rank: int | None = None
    input_move: str = ""

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_resolved(self) -> bool:
        """Both squares and the moving piece are known."""
        return (
            self.from_coord is not None
            and self.to_coord is not None
            and self.piece is not None
        )

    @property
    def kind(self) -> PieceKind | None:
        """Kind of the moving piece, resolved or as named by the notation."""
        if self.piece is not None:
            return self.piece.kind
        return self.piece_kind

    @property
    def is_check(self) -> bool:
        return self.check == Check.CHECK

    @property
    def is_checkmate(self) -> bool:
        return self.check == Check.MATE

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def text(self) -> str:
        """Verbose description, e.g. ``White Knight moves from g1 to f3``."""
        kind = self.kind
        if kind is None:
            return ""

        words = [self.to_move.label, kind.label]
        if self.castling is not None:
            side = "King" if self.castling == Castling.KINGSIDE else "Queen"
            words += ["castles", side, "side"]
        else:
            capture = self.is_capture or self.captured is not None
            words.append("captures" if capture else "moves")
            if self.from_coord is not None:
                words += ["from", str(self.from_coord)]
            elif self.from_file is not None or self.from_rank is not None:
                hint = ""
                if self.from_file is not None:
                    hint += "abcdefgh"[self.from_file]
                if self.from_rank is not None:
                    hint += str(self.from_rank + 1)
                words += ["from", hint]
            if self.to_coord is not None:
                words += ["to" if not capture else "on", str(self.to_coord)]
            if self.promotion is not None:
                words += ["promotes to", self.promotion.label]

        if self.check == Check.CHECK:
            words.append("check")
        elif self.check == Check.MATE:
            words.append("checkmate")
        return " ".join(words)

    def __str__(self) -> str:
        return self.input_move
