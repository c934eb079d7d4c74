# utils/levels.py
from typing import Dict, List, Optional

from config import LEVEL_COUNT, TEAM_ID_MIN, TEAM_ID_MAX

# One secret per level. Teams find these in the shell puzzle.
LEVEL_PASSWORDS: Dict[int, str] = {
    1: "ZjLjTmM6FvvyRnrb2rfNWOZOTa6ip5If",
    2: "263JGJPfgU6LtdEvgfWU1XP5yac29mFx",
    3: "MNk8KNH3Usiio41PRUEoDFPqfxLPlSmx",
    4: "2WmrDFRmJIq3IPxneAaMGhap0pFhF3NJ",
    5: "4oQYVPkxZOOEOO5pTW81FB8j8lxXGUQw",
    6: "HWasnPhtq9AVKe0dmk45nxy20cvUa6EG",
    7: "morbNTDkSW6jIlUc0ymOdMaLnOlFVAaj",
    8: "dfwvzFQi4mU0wfNbFOe9RoWskMLg7eEc",
    9: "4CKMh1JI91bUIZZPXDqGanal4xvAg0JM",
    10: "FGUW5ilLVJrxX9kMYMmlN4MgbpfMiqey",
}

TEAM_NAMES: Dict[int, str] = {
    101: "Sparkle",
    102: "Brogrammers",
    103: "Codehub",
    104: "Impostor_coder",
    105: "Alt_F4",
    106: "Terminal Spoolers",
    107: "BlackHat Buffs",
    108: "Coda-Sorous",
    109: "Orion",
    110: "PyJa Alchemists",
    111: "TechSpark",
    112: "Ctrl C+ Ctrl V",
    113: "XP Hunters",
    114: "Cache Me If You Can",
    115: "Techtonic",
    116: "2bitHacker",
    117: "Charlie",
    118: "Bug Smashers",
    119: "CriticalDuo",
    120: "Mumbai Indians",
    121: "Uncs_fromholysinc",
    122: "Tech nova",
    123: "2 Guys 1 Bug",
    124: "AlgoRhythms",
    125: "Team Explorers",
    126: "Rizzlers",
    127: "Hustlers",
    128: "JARVIS",
    129: "The Masters",
    130: "Shel-earners",
    131: "The Shell Troopers",
    132: "D2",
    133: "The digital disruptors",
    134: "Knight Coders",
    135: "The ultimate",
    136: "The Silent shells",
    137: "Seekers",
    138: "OFI",
    139: "Team blue",
    140: "PairCoders [M]^2",
    141: "2gether",
    142: "Let it Happen",
    143: "PseudoCoders",
    144: "TeamDriver",
    145: "Cryptic Coders",
    146: "XL1",
    147: "The techies",
    148: "YSRJ CRANUXX",
    149: "Clue finders",
    150: "ShadowSec",
    151: "Dynamic",
    152: "codeDuo",
    153: "Code Warriors",
    154: "Byte Busters",
    155: "Shell Seekers",
    156: "Terminal Masters",
    157: "Code Breakers",
    158: "Digital Ninjas",
    159: "Tech Titans",
    160: "Cyber Champions",
    161: "Logic Legends",
    162: "Binary Blazers",
    163: "Data Dynamos",
    164: "Script Spartans",
    165: "Pixel Pirates",
    166: "Code Crusaders",
    167: "Tech Troopers",
    168: "Digital Dragons",
    169: "Byte Bandits",
    170: "Terminal Titans",
    171: "Shell Strikers",
    172: "Code Commandos",
    173: "Tech Templars",
    174: "Digital Detectives",
    175: "Binary Bombers",
    176: "Script Soldiers",
    177: "Pixel Pioneers",
    178: "Code Conquerors",
    179: "Tech Tacticians",
    180: "Digital Defenders",
    181: "Byte Builders",
    182: "Terminal Trackers",
    183: "Shell Shamans",
    184: "Code Crafters",
    185: "Tech Thunders",
    186: "Digital Daredevils",
    187: "Binary Beasts",
    188: "Script Snipers",
    189: "Pixel Predators",
    190: "Code Cardinals",
    191: "Tech Tigers",
    192: "Digital Diamonds",
    193: "Byte Blazers",
    194: "Terminal Terminators",
    195: "Shell Shooters",
    196: "Code Catalysts",
    197: "Tech Tornadoes",
    198: "Digital Dynasts",
    199: "Binary Bullets",
    200: "Script Supreme",
}


def resolve_level(password: str) -> Optional[int]:
    """
    Return the level unlocked by `password`, or None if it matches no level.

    Exact, case-sensitive comparison with no trimming. Levels are checked from
    the highest down so the highest matching level wins.
    """
    for level in range(LEVEL_COUNT, 0, -1):
        if LEVEL_PASSWORDS.get(level) == password:
            return level
    return None


def _team_number(team_id) -> Optional[int]:
    try:
        return int(str(team_id).strip())
    except (TypeError, ValueError):
        return None


def team_name(team_id: str) -> str:
    return TEAM_NAMES.get(_team_number(team_id), f"Team {team_id}")


def team_options() -> List[str]:
    """Team ids offered in the submission form, as strings."""
    return [str(i) for i in range(TEAM_ID_MIN, TEAM_ID_MAX + 1)]
