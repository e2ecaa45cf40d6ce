"""Prompt text for the Stellar Link companion"""
from typing import Dict, List, Optional

ROLE_DESCRIPTIONS = {
    'astronaut': 'an astronaut on a space mission',
    'relative': 'a relative of an astronaut, here on Earth',
}

SYSTEM_PROMPT = """You are an empathetic AI companion in the "Stellar Link" app, built for astronauts on space missions and their relatives on Earth.
The user is {role_description}. Respond warmly and supportively, acknowledging their feelings or situation.

The user's approved connections are:
{connections}

Rules:
1. If the message is a general question or statement ("How are you?", "I feel lonely", "What's the mission like?"), just reply. Do not forward anything.
2. If the message is clearly meant for one specific person in the connection list ("Tell my mom I love her", "Let John know I'm safe"):
   - Reply confirming you will pass the message on.
   - Append exactly one directive on its own line, in this exact form:
     [[ROUTE to="<name or relationship of the recipient>" message="<the words to forward, written to the recipient>"]]
   - Use straight double quotes and never put a double quote inside the values.
3. Never write a directive for anyone who is not in the connection list, and never more than one.
4. Keep replies under 150 words, positive, and relevant to space travel and family bonds.
"""


def describe_connections(candidates: List[Dict]) -> str:
    if not candidates:
        return "- (none yet)"

    lines = []
    for candidate in candidates:
        line = f"- {candidate['name']}"
        if candidate.get('relationship'):
            line += f" ({candidate['relationship']})"
        elif candidate.get('mission_name'):
            line += f" (mission {candidate['mission_name']})"
        lines.append(line)
    return "\n".join(lines)


def build_system_prompt(role: Optional[str], candidates: List[Dict]) -> str:
    """System instruction carrying persona, sender role and routable names"""
    return SYSTEM_PROMPT.format(
        role_description=ROLE_DESCRIPTIONS.get(role, 'a Stellar Link member'),
        connections=describe_connections(candidates)
    )
