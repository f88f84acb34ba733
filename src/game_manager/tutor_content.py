"""Static teaching content: the Socratic tutor script and concept cards."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class DialogueOption:
    label: str
    is_correct: bool
    response: str


@dataclass(frozen=True)
class DialogueStep:
    step: int
    text: str
    options: Tuple[DialogueOption, ...] = ()


@dataclass(frozen=True)
class ConceptCard:
    """A one-page explainer opened from the tutor."""

    title: str
    subtitle: str
    tier: str
    sections: Tuple[Tuple[str, str], ...]  # (heading, body)
    formula: str
    formula_note: str
    tagline: str


TUTOR_NAME = "Dr. Wave (AI Tutor)"
SHADOWING_PATTERN = "6G_SHADOWING_DETECTED"

SOCRATIC_DIALOGUE: Dict[str, Tuple[DialogueStep, ...]] = {
    "metal_blockage": (
        DialogueStep(
            step=1,
            text=(
                "I see the signal didn't quite reach the entire stadium. "
                "Notice the red zone behind the metal bleachers?"
            ),
            options=(
                DialogueOption(
                    "Metal absorbs all RF energy",
                    False,
                    "Not quite. While some absorption happens, it's not the "
                    "primary behavior at 28 GHz.",
                ),
                DialogueOption(
                    "Metal reflects RF waves",
                    True,
                    "Correct! At 28 GHz (mmWave), metal structures cause "
                    "significant shadowing and reflection.",
                ),
                DialogueOption(
                    "Metal is transparent to RF",
                    False,
                    "Incorrect. Metal is a conductor and interacts strongly "
                    "with EM waves.",
                ),
            ),
        ),
        DialogueStep(
            step=2,
            text=(
                "Since the bleachers block the line-of-sight, how can we get "
                "the signal around them without moving the stadium?"
            ),
            options=(
                DialogueOption(
                    "Increase power to burn through",
                    False,
                    "That would violate safety regulations and drain the battery!",
                ),
                DialogueOption(
                    "Use lower frequency",
                    False,
                    "We need the bandwidth of 28 GHz for 6G speeds.",
                ),
                DialogueOption(
                    "Reflect the signal",
                    True,
                    "Exactly. We can bounce the signal using a passive surface.",
                ),
            ),
        ),
        DialogueStep(
            step=3,
            text=(
                "Check your toolbox. Which component acts like a "
                "'smart mirror' for radio waves?"
            ),
            options=(
                DialogueOption(
                    "Phased Array",
                    False,
                    "A Phased Array transmits active signals. We need a "
                    "passive reflector.",
                ),
                DialogueOption(
                    "RIS Panel",
                    True,
                    "Spot on. A Reconfigurable Intelligent Surface (RIS) can "
                    "steer reflections into dead zones.",
                ),
            ),
        ),
    ),
}

RIS_CONCEPT_CARD = ConceptCard(
    title="Reconfigurable Intelligent Surfaces (RIS)",
    subtitle="Programmable Wireless Environments",
    tier="Intermediate - Level 2",
    sections=(
        (
            "The Core Idea",
            "A Reconfigurable Intelligent Surface is a flat panel covered with "
            "electronically controllable elements that can reflect, absorb, or "
            "redirect radio waves on demand, like a \"smart mirror\" for "
            "wireless signals.",
        ),
        (
            "Why It Matters",
            "Traditional wireless networks rely on base stations blasting "
            "signals in all directions. RIS technology allows us to \"paint\" "
            "signals exactly where needed by bouncing them around obstacles. "
            "This is crucial for 6G networks in dense cities where skyscrapers "
            "block mmWave signals.",
        ),
        (
            "The Physics (Simplified)",
            "Reflected beam angle depends on the phase gradient across the RIS.",
        ),
    ),
    formula="theta_r = arcsin(lambda * dphi / (2 * pi * d))",
    formula_note=(
        "Where lambda is wavelength and dphi is the phase difference. By "
        "programming the phase of each element, we can make the RIS focus "
        "reflected waves like a lens focuses light."
    ),
    tagline="Instead of blasting through the wall, bounce around it.",
)
