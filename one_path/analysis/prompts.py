"""
Analysis prompt and response schema.

The instruction is fixed; the engine receives it together with the two
documents and must answer with JSON matching RESPONSE_SCHEMA.
"""

ANALYSIS_PROMPT = """You are an expert career coach AI. Your task is to perform a highly detailed and granular comparison between a user's resume and a target resume/profile, then generate a comprehensive learning roadmap.

The FIRST attached document is the user's resume. The SECOND attached document is the target resume/profile.

**PART 1: RESUME ANALYSIS**
Compare every section (Education, Skills, Experience, etc.) present in the Target Resume. Within each section, compare items one-by-one, keyed by a short unique label per item. If the user is missing something, explicitly state it is a 'Gap'. For every comparison, provide a concise 'Analysis' with actionable feedback and set 'category' to exactly one of:
- "gap": the user lacks the item entirely
- "improvement": the user has the item but it needs strengthening
- "on_track": the user already matches or exceeds the target

**PART 2: SKILL DEVELOPMENT ROADMAP**
Based on the gaps identified, create detailed, multi-phase learning roadmaps for each major skill required.
- Structure: Each roadmap should have Phases (Beginner, Intermediate, Advanced), in that order.
- Content: Each phase should contain Subjects, which in turn contain granular Topics.
- Resources: For EVERY topic, provide AT LEAST TWO high-quality, free, and direct-link online resources (e.g., one 'Video', one 'Article'/'Blog'/'Official Docs').
- Every resource URL must be a complete absolute https URL. Use the type 'Video' only for YouTube links.

If no gaps are found, return an empty "roadmaps" array.

Return a single JSON object adhering to the provided schema. Do not add any extra text or formatting outside the JSON object."""


RESOURCE_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"type": "string"},
        "title": {"type": "string"},
        "url": {"type": "string"},
    },
    "required": ["type", "title", "url"],
}

TOPIC_SCHEMA = {
    "type": "object",
    "properties": {
        "topic_name": {"type": "string"},
        "resources": {"type": "array", "items": RESOURCE_SCHEMA},
    },
    "required": ["topic_name", "resources"],
}

SUBJECT_SCHEMA = {
    "type": "object",
    "properties": {
        "subject_name": {"type": "string"},
        "topics": {"type": "array", "items": TOPIC_SCHEMA},
    },
    "required": ["subject_name", "topics"],
}

PHASE_SCHEMA = {
    "type": "object",
    "properties": {
        "phase_name": {"type": "string"},
        "subjects": {"type": "array", "items": SUBJECT_SCHEMA},
    },
    "required": ["phase_name", "subjects"],
}

ROADMAP_SCHEMA = {
    "type": "object",
    "properties": {
        "skill": {"type": "string"},
        "phases": {"type": "array", "items": PHASE_SCHEMA},
    },
    "required": ["skill", "phases"],
}

ANALYSIS_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "you": {"type": "string"},
        "target": {"type": "string"},
        "analysis": {"type": "string"},
        "category": {"type": "string", "enum": ["gap", "improvement", "on_track"]},
    },
    "required": ["you", "target", "analysis"],
}

ANALYSIS_SECTION_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        # Mapping of item label -> comparison
        "items": {"type": "object", "additionalProperties": ANALYSIS_ITEM_SCHEMA},
    },
    "required": ["title", "items"],
}

RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "analysis": {"type": "array", "items": ANALYSIS_SECTION_SCHEMA},
        "roadmaps": {"type": "array", "items": ROADMAP_SCHEMA},
    },
    "required": ["analysis", "roadmaps"],
}
