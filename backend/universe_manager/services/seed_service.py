"""
Seed Service

Creates a small demo universe: two brands, a split roster and the standard
championship line-up. Runs only on an empty titles table.
"""
import logging
from dataclasses import dataclass
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from universe_manager.database import transaction
from universe_manager.models import (
    Gender,
    Show,
    Title,
    TitleGender,
    TitleType,
    Wrestler,
    prestige_tier_for_division,
)
from universe_manager.services.roster_manager import RosterAssignmentManager

logger = logging.getLogger(__name__)

RAW = "Monday Night RAW"
SMACKDOWN = "Friday Night SmackDown"

DEMO_SHOWS = [
    (RAW, "The flagship Monday night brand"),
    (SMACKDOWN, "The Friday night blue brand"),
]

# (name, gender, wins, losses, brand)
DEMO_WRESTLERS = [
    ("Cody Rhodes", Gender.MALE, 45, 12, SMACKDOWN),
    ("Seth Rollins", Gender.MALE, 40, 15, RAW),
    ("Gunther", Gender.MALE, 52, 8, RAW),
    ("LA Knight", Gender.MALE, 30, 14, SMACKDOWN),
    ("Rhea Ripley", Gender.FEMALE, 38, 9, RAW),
    ("Bianca Belair", Gender.FEMALE, 36, 11, SMACKDOWN),
    ("Iyo Sky", Gender.FEMALE, 29, 13, RAW),
    ("Tiffany Stratton", Gender.FEMALE, 22, 10, SMACKDOWN),
]

# (name, type, division, gender, brand or None for cross-brand)
DEMO_TITLES = [
    ("World Heavyweight Championship", TitleType.SINGLES, "World", TitleGender.MALE, RAW),
    ("WWE Championship", TitleType.SINGLES, "WWE Championship", TitleGender.MALE, SMACKDOWN),
    ("Women's World Championship", TitleType.SINGLES, "Women's World", TitleGender.FEMALE, RAW),
    ("WWE Women's Championship", TitleType.SINGLES, "WWE Women's Championship", TitleGender.FEMALE, SMACKDOWN),
    ("Intercontinental Championship", TitleType.SINGLES, "Intercontinental", TitleGender.MALE, RAW),
    ("United States Championship", TitleType.SINGLES, "United States", TitleGender.MALE, SMACKDOWN),
    ("Women's Intercontinental Championship", TitleType.SINGLES, "Women's Intercontinental", TitleGender.FEMALE, RAW),
    ("Women's United States Championship", TitleType.SINGLES, "Women's United States", TitleGender.FEMALE, SMACKDOWN),
    ("World Tag Team Championship", TitleType.TAG_TEAM, "World Tag Team", TitleGender.MALE, RAW),
    ("WWE Tag Team Championship", TitleType.TAG_TEAM, "WWE Tag Team", TitleGender.MALE, SMACKDOWN),
    ("Women's Tag Team Championship", TitleType.TAG_TEAM, "Women's Tag Team", TitleGender.FEMALE, None),
    ("Money in the Bank", TitleType.SINGLES, "Money in the Bank", TitleGender.MIXED, None),
    ("Hardcore Championship", TitleType.SINGLES, "Hardcore", TitleGender.MIXED, None),
    ("Speed Championship", TitleType.SINGLES, "Speed", TitleGender.MIXED, None),
    ("24/7 Championship", TitleType.SINGLES, "24/7", TitleGender.MIXED, None),
]


@dataclass
class SeedResult:
    """Counts of created demo rows"""
    created: bool
    shows: int = 0
    wrestlers: int = 0
    titles: int = 0
    roster_assignments: int = 0


class SeedService:
    """Service class for demo data"""

    def __init__(self, db: Session):
        self.db = db

    def seed_demo_universe(self) -> SeedResult:
        """Create demo shows, wrestlers, rosters and vacant titles once"""
        existing = self.db.execute(select(func.count(Title.id))).scalar() or 0
        if existing:
            logger.info(f"Demo data skipped: {existing} titles already exist")
            return SeedResult(created=False)

        result = SeedResult(created=True)
        with transaction(self.db):
            shows = {}
            for name, description in DEMO_SHOWS:
                show = self.db.execute(select(Show).where(Show.name == name)).scalars().first()
                if show is None:
                    show = Show(name=name, description=description)
                    self.db.add(show)
                    result.shows += 1
                shows[name] = show
            self.db.flush()

            rosters = RosterAssignmentManager(self.db)
            for name, gender, wins, losses, brand in DEMO_WRESTLERS:
                wrestler = Wrestler(name=name, gender=gender, wins=wins, losses=losses)
                self.db.add(wrestler)
                self.db.flush()
                result.wrestlers += 1
                rosters.assign_to_show(shows[brand].id, wrestler.id)
                result.roster_assignments += 1

            for name, title_type, division, gender, brand in DEMO_TITLES:
                self.db.add(
                    Title(
                        name=name,
                        title_type=title_type,
                        division=division,
                        prestige_tier=prestige_tier_for_division(division),
                        gender=gender,
                        show_id=shows[brand].id if brand else None,
                        is_active=True,
                        is_user_created=False,
                    )
                )
                result.titles += 1

        logger.info(
            f"Demo data created: {result.shows} shows, {result.wrestlers} wrestlers, "
            f"{result.titles} titles"
        )
        return result
