"""The fixed, ordered registry of notebook UX guidelines."""

from __future__ import annotations

from notebook_ux_review.models import GuidelineDescriptor

CLEAR_HEADER = "clearHeader"
GOAL_OBJECTIVE_PRESENT = "goalObjectivePresent"
SETUP_PREREQUISITES = "setupPrerequisites"
SECTION_HEADERS_MARKDOWN = "sectionHeadersMarkdown"
HANDLE_ERRORS_OUTPUTS = "handleErrorsOutputs"
HARDCODING_AVOIDED = "hardcodingAvoided"
CONCISE_CELLS = "conciseCells"
CODE_COMMENTING = "codeCommenting"
END_WRAP_UP_HANDOFF = "endWrapUpHandoff"

# Order is part of the public contract: results are reported in this order.
GUIDELINES: tuple[GuidelineDescriptor, ...] = (
    GuidelineDescriptor(
        id=CLEAR_HEADER,
        name="Clear Header",
        description="Clear, succinct title (<15 words) of notebook's purpose",
    ),
    GuidelineDescriptor(
        id=GOAL_OBJECTIVE_PRESENT,
        name="Goal/Objective Present",
        description="Summary of what the notebook does and why",
    ),
    GuidelineDescriptor(
        id=SETUP_PREREQUISITES,
        name="Setup & Pre-Requisites",
        description=(
            "Includes installation steps, required files, "
            "and environment assumptions"
        ),
    ),
    GuidelineDescriptor(
        id=SECTION_HEADERS_MARKDOWN,
        name="Section Headers/Markdown",
        description=(
            "Each code cell/section is preceded by a markdown block "
            "explaining its purpose"
        ),
    ),
    GuidelineDescriptor(
        id=HANDLE_ERRORS_OUTPUTS,
        name="Handle Errors or Outputs",
        description=(
            "Highlights expected outputs or common errors "
            "(e.g. YAML structure, missing files, etc...)"
        ),
    ),
    GuidelineDescriptor(
        id=HARDCODING_AVOIDED,
        name="Hardcoding Avoided",
        description=(
            "Uses variables or config for file paths instead of hardcoded strings"
        ),
    ),
    GuidelineDescriptor(
        id=CONCISE_CELLS,
        name="Concise Cells",
        description="Breaks logic into manageable chunks; avoids long, dense blocks",
    ),
    GuidelineDescriptor(
        id=CODE_COMMENTING,
        name="Code Commenting",
        description=(
            "Inline comments clarify non-obvious logic or structure within code cells"
        ),
    ),
    GuidelineDescriptor(
        id=END_WRAP_UP_HANDOFF,
        name="End Wrap-Up & Handoff",
        description="Notebook ends with a summary and/or next step guidance",
    ),
)


def get_guideline(guideline_id: str) -> GuidelineDescriptor:
    """Look up a guideline by id.

    Raises:
        KeyError: If no guideline has this id.
    """
    for guideline in GUIDELINES:
        if guideline.id == guideline_id:
            return guideline
    msg = f"Unknown guideline: {guideline_id}"
    raise KeyError(msg)
