"""Zähler für die fortlaufende Vergabe von Roll-Nummern."""

from dataclasses import dataclass


@dataclass
class RollCounter:
    """Vergibt Roll-Nummern streng aufsteigend.

    Explizit gesetzte Nummern (z.B. beim Laden) werden per observe() gemeldet,
    damit spätere automatische Nummern nie kollidieren.
    """

    # Nächste frei vergebbare Nummer
    next_roll: int = 1001

    def issue(self) -> int:
        roll = self.next_roll
        self.next_roll += 1
        return roll

    def observe(self, roll: int) -> None:
        if roll >= self.next_roll:
            self.next_roll = roll + 1
