"""
Round-robin schedule generator.
Pairs every team with every other team once and assigns each game a date,
time slot and venue.
"""

from datetime import datetime, date, timedelta
from typing import List, Sequence

from app.models import Match
from app.core.config import DATE_INPUT_FORMAT, GAME_TIME_SLOTS
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class ScheduleGenerator:
    """
    Builds the full round-robin match list.

    Pairing order is fixed: team i hosts team j for every i < j, in index
    order. Venues are filled in rotation, each venue hosting one game per
    time slot per day; once every slot of the day is used the schedule moves
    on to the next calendar day.
    """

    def __init__(self, time_slots=None):
        self.time_slots = list(time_slots) if time_slots is not None else list(GAME_TIME_SLOTS)

    def _parse_date(self, date_input) -> date:
        """Parse a date from string or date object."""
        if isinstance(date_input, datetime):
            return date_input.date()
        if isinstance(date_input, date):
            return date_input
        if isinstance(date_input, str):
            return datetime.strptime(date_input.strip(), DATE_INPUT_FORMAT).date()
        return date_input

    def games_per_day(self, venue_count: int) -> int:
        return venue_count * len(self.time_slots)

    def generate(self, competitors: Sequence[str], venues: Sequence[str], start_date) -> List[Match]:
        """
        Generate all round-robin matches.

        Inputs are expected to be validated already (at least two teams, at
        least one venue, a real start date).

        Args:
            competitors: Team names in input order
            venues: Venue names in input order
            start_date: First match day (date or YYYY-MM-DD string)

        Returns:
            Matches in pair-enumeration order
        """
        matches = []
        current_date = self._parse_date(start_date)
        venue_count = len(venues)
        games_per_day = self.games_per_day(venue_count)
        match_index = 0

        for i in range(len(competitors)):
            for j in range(i + 1, len(competitors)):
                venue = venues[match_index % venue_count]
                time_slot = (match_index % games_per_day) // venue_count

                matches.append(Match(
                    id=f"MATCH_{match_index + 1:03d}",
                    home=competitors[i],
                    away=competitors[j],
                    date=current_date,
                    time=self.time_slots[time_slot],
                    venue=venue
                ))

                match_index += 1
                if match_index % games_per_day == 0:
                    current_date += timedelta(days=1)

        logger.info(
            "Generated %d matches for %d teams across %d venues",
            len(matches), len(competitors), venue_count
        )
        return matches
