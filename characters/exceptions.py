"""Character errors; ``message`` is safe to show to clients."""

from core.exceptions import DomainError


class CharacterError(DomainError):
    default_message = "Character error"


class UnknownGearError(CharacterError):
    def __init__(self, kind: str, gear_id: str):
        self.kind = kind
        self.gear_id = gear_id
        super().__init__(f"Unknown {kind}: {gear_id}")
