"""
Instruction prompt sent to the vision model together with the screenshot.
"""

SEGMENT_LINE_FORMAT = "SEG#  CARRIER  FLT#  CLASS  DATE  ORG DEST  DEPT ARR"

# Values used when a field is not visible in the screenshot
PLACEHOLDERS = {
    "carrier": "XX",
    "flight_number": "0000",
    "date": "01JAN",
    "airport": "XXX",
    "times": "0000 0000",
}

CABIN_CLASS_CODES = {
    "Economy": "Y",
    "Premium Economy": "W",
    "Business": "J",
    "First": "F",
}
DEFAULT_CLASS_CODE = "Y"


def _class_mapping_lines() -> str:
    return "\n".join(f"    {cabin} = {code}" for cabin, code in CABIN_CLASS_CODES.items())


def build_prompt() -> str:
    """Return the fixed Sabre conversion instructions."""
    return f"""
Convert the attached flight screenshot into Sabre GDS PNR air segment format.

Strict rules:
- Output plain text only.
- No explanations.
- No markdown.
- No code blocks.
- Format each line as:

  {SEGMENT_LINE_FORMAT}

Formatting rules:
- Use 24-hour time.
- Add +1 if arrival is next day.
- If 1 stop is shown, split into separate flight segments.
- Do NOT invent connection cities or times unless explicitly shown.
- If connection details are missing, use placeholders:
    unknown carrier = {PLACEHOLDERS["carrier"]}
    unknown flight number = {PLACEHOLDERS["flight_number"]}
    unknown date = {PLACEHOLDERS["date"]}
    unknown airport = {PLACEHOLDERS["airport"]}
    unknown times = {PLACEHOLDERS["times"]}

Codeshare rules:
- If several airline codes are shown for one flight, the FIRST listed code is the marketing carrier.
- Use the marketing carrier code and its flight number on the segment line.
- Never use the operating carrier as the segment carrier.
- If the operating carrier is identifiable, add a line directly below that segment:
    OPERATED BY <full airline name>

Default class mapping:
{_class_mapping_lines()}
- If no cabin is shown, use {DEFAULT_CLASS_CODE}.
"""


SABRE_PROMPT = build_prompt()
