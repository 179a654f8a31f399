"""
Story generation constants for the NOVA story backend.

Values baked into the prompt templates.
"""

# Story generation constants
STORY_CONSTANTS = {
    "kid_max_age": 12,  # Ages at or below this get the playful tone
    "quiz_questions_per_card": 2,  # Adventure story
    "final_quiz_questions": 3,  # Astronaut role story
    "min_words_per_card": 150,
}

# Fixed five-part flow of the astronaut role story, in order
ASTRONAUT_ROLE_SECTIONS = (
    "Hook/First Scene",
    "Characteristics of an Astronaut",
    "Life of an Astronaut",
    "Impact of an Astronaut",
    "Characteristics Revisited",
)
