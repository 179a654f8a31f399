"""
Prompt for the "astronaut role" story.

A five-part interactive story about what it takes to be an astronaut. Each
section becomes one story card with a single interactive element, followed
by a closing quiz about the whole story.
"""

from ..types import UserInputs
from ...config.story import ASTRONAUT_ROLE_SECTIONS, STORY_CONSTANTS

# Example beat for each section, keyed by section title
SECTION_GUIDANCE = {
    "Hook/First Scene": (
        "Start with an empathy hook. For example: \"Hey {name}, have you ever wondered what "
        "would happen if an astronaut made a mistake during a critical mission? It's a heavy "
        "thought! But before we explore that, let's see what their life is really like...\""
    ),
    "Characteristics of an Astronaut": (
        "Introduce traits like discipline, teamwork, and curiosity. Narrate a simple game. "
        "For example: \"Imagine I'm giving you a special, shiny space wrench, {name}. Hold onto "
        "it for me, it's very important. I might ask you about it later. This is about "
        "responsibility, a key astronaut trait!\""
    ),
    "Life of an Astronaut": (
        "Describe daily routines. Add an interactive choice. For example: \"Suddenly, an alarm "
        "blinks! You have two alerts, {name}. Do you want to help fix the solar panel outside "
        "or check the oxygen system inside first?\""
    ),
    "Impact of an Astronaut": (
        "Show the impact on Earth if astronauts didn't exist. For example: \"Without the work "
        "of astronauts on stations like the ISS, we might not have the accurate GPS in your "
        "family's car, or the weather forecasts that tell you if you can play outside this "
        "weekend.\""
    ),
    "Characteristics Revisited": (
        "Return to the traits. Ask the user a reflective question. For example: \"We talked "
        "about responsibility with that wrench earlier, {name}. Teamwork, staying calm under "
        "pressure... after seeing all this, do you think you have what it takes to be an "
        "astronaut?\""
    ),
}


def _story_structure(name: str) -> str:
    lines = []
    for number, title in enumerate(ASTRONAUT_ROLE_SECTIONS, start=1):
        guidance = SECTION_GUIDANCE[title].format(name=name)
        lines.append(f"{number}. **{title}:** {guidance}")
    return "\n".join(lines)


def build_astronaut_role_prompt(inputs: UserInputs) -> str:
    """Build the five-part astronaut role prompt for one user."""
    name = inputs.name
    section_count = len(ASTRONAUT_ROLE_SECTIONS)
    quiz_count = STORY_CONSTANTS["final_quiz_questions"]
    first, second, third, fourth, fifth = ASTRONAUT_ROLE_SECTIONS

    return f"""You are an expert storyteller for children and teenagers, creating a long, immersive, interactive, empathy-focused story about the role of an astronaut.

Your task is to generate the story in a structured JSON format based on the following {section_count}-part flow. Use the user's parameters to personalize the story.

## User Parameters:
- Name: {name}
- Age: {inputs.age}
- Language: {inputs.language}
- Interests: {inputs.interests_text}

## Story Structure (Generate one story_card for each section, in this order):
{_story_structure(name)}

## Writing Style:
- Age-appropriate for a {inputs.age}-year-old
- Write the whole story in {inputs.language}
- Interactive and conversational, with {name} personally included throughout
- Connect the story to {name}'s interests where it fits naturally

## Final Quiz:
After the {section_count} story cards, create a final quiz of {quiz_count} multiple-choice questions about the story you just told.

## OUTPUT FORMAT:
- Your entire response MUST be a single, valid JSON object.
- Do NOT include any text or explanations outside the JSON, and do NOT wrap it in markdown code fences like ```json.
- Follow this structure exactly:
{{
  "story_title": "What Does It Take to Be an Astronaut?",
  "story_cards": [
    {{ "section": "{first}", "card_title": "A Big Question", "content": "...", "interactive_element": "..." }},
    {{ "section": "{second}", "card_title": "An Astronaut's Qualities", "content": "...", "interactive_element": "..." }},
    {{ "section": "{third}", "card_title": "A Day in Zero Gravity", "content": "...", "interactive_element": "..." }},
    {{ "section": "{fourth}", "card_title": "A World Without Astronauts", "content": "...", "interactive_element": "..." }},
    {{ "section": "{fifth}", "card_title": "Could You Be an Astronaut?", "content": "...", "interactive_element": "..." }}
  ],
  "final_quiz": [
    {{
      "question": "Quiz question about the story?",
      "options": ["Option A", "Option B", "Option C"],
      "correct_answer": "The correct option text"
    }}
  ]
}}
"""
