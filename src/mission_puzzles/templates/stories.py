"""
Narrative templates for the story wrapper.

Each template explains, in plain words, how the player at Mission Control
should manipulate the grid. Placeholders use double braces, e.g.
``{{antagonist}}``. Titles stay under 60 characters and descriptions are
kept short enough for the mission card.
"""

from dataclasses import dataclass
from typing import Dict, List

from ..data.models import TransformationKind


@dataclass(frozen=True)
class StoryTemplate:
    id: str
    title: str
    description: str


ANTAGONISTS = [
    "Elon Musk",
    "Jeff Bezos",
    "Richard Branson",
    "Mysterious Tech Mogul",
]

COMPONENTS = [
    "gyro-stabilizer",
    "life-support unit",
    "quantum nav computer",
    "solar array controller",
]

STORY_TEMPLATES: Dict[TransformationKind, List[StoryTemplate]] = {
    TransformationKind.HORIZONTAL_REFLECTION: [
        StoryTemplate(
            id="mirror_panels",
            title="Flip the Solar Grid!",
            description=(
                "🚀 Crisis! {{antagonist}} was taking selfies 📱 near the control panel and knocked "
                "the solar array blueprint backwards ⇄! Study the before → after symbol grids to see "
                "the flip. Mirror today's entire grid left-to-right ↔️ to restore oxygen 💨!"
            ),
        ),
    ],
    TransformationKind.ROTATION_90DEG: [
        StoryTemplate(
            id="quarter_spin",
            title="Realign the Launch Pad 90°!",
            description=(
                "🔥 Countdown halted! {{antagonist}} was playing mobile games 🎮 and spun the "
                "launch-pad orientation map one quarter-turn ↻. Study the sample grids to see the "
                "rotation. Turn today's entire grid 90° clockwise 🔃 before the boosters fire!"
            ),
        ),
    ],
    TransformationKind.PATTERN_COMPLETION: [
        StoryTemplate(
            id="complete_colors",
            title="Finish the Color Pattern!",
            description=(
                "📡 Pattern failure! {{antagonist}} was too busy watching space soap operas 📺 to "
                "finish the transmission grid. Examine the example grids to see how blank spaces "
                "should be filled, then complete today's grid ✨ so the crew can call home 📞!"
            ),
        ),
    ],
    TransformationKind.VERTICAL_REFLECTION: [
        StoryTemplate(
            id="mirror_vertical",
            title="Flip the Radar Upside Down!",
            description=(
                "📡 Radar calamity! {{antagonist}} spilled coffee ☕ on the console and flipped the "
                "radar display upside-down 🛸. Study the before → after grids to see the flip. "
                "Mirror today's entire grid top-to-bottom 🔼🔽 to prevent collisions 💥!"
            ),
        ),
    ],
    TransformationKind.ROTATION_270DEG: [
        StoryTemplate(
            id="three_spin",
            title="Spin the Grid 270°!",
            description=(
                "🌌 Trajectory disaster! {{antagonist}} was showing off to visitors 👥 and spun the "
                "flight deck display three clicks ↻↻↻. Study the before → after grids to see the "
                "rotation. Turn today's entire grid 270° clockwise 🔃 to save the mission 🚀!"
            ),
        ),
    ],
    TransformationKind.PRIMARY_DIAGONAL_REFLECTION: [
        StoryTemplate(
            id="diagonal_swap",
            title="Untangle the {{component}}!",
            description=(
                "🛰️ Wiring mix-up! {{antagonist}} rewired the {{component}} so every row landed "
                "where a column should be ↘️. Study the example grids, then flip today's grid over "
                "its top-left to bottom-right diagonal to restore the signal!"
            ),
        ),
    ],
    TransformationKind.SECONDARY_DIAGONAL_REFLECTION: [
        StoryTemplate(
            id="anti_diagonal_swap",
            title="Counter-Flip the {{component}}!",
            description=(
                "⚠️ Calibration chaos! {{antagonist1}} and {{antagonist2}} argued over the "
                "{{component}} and mirrored it along the wrong diagonal ↙️. Study the examples, "
                "then flip today's grid over its top-right to bottom-left diagonal!"
            ),
        ),
    ],
}


def get_story_templates(kind: TransformationKind) -> List[StoryTemplate]:
    """Templates for a transformation kind; empty if it has no narrative."""
    return STORY_TEMPLATES.get(kind, [])
