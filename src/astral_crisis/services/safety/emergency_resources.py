"""
Emergency Resources

Read-only directory of emergency contacts used when wording
recommendations and by display layers.

ARCHITECTURE: The directory is an explicit value passed into the
recommendation generator, not ambient global state. Swap it for a
jurisdiction-specific directory by constructing a new one.

LEGAL_REVIEW_REQUIRED: Contact information must be verified for
accuracy in each jurisdiction.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EmergencyContact:
    """
    A single emergency contact.

    Attributes:
        key: Directory key (e.g., "suicide_lifeline")
        name: Display name
        phone: Phone number, if reachable by phone
        text: Text-line instructions, if reachable by text
        website: Website URL
        description: Brief description
        available: Availability window (e.g., "24/7")
    """

    key: str
    name: str
    phone: Optional[str] = None
    text: Optional[str] = None
    website: Optional[str] = None
    description: str = ""
    available: str = "24/7"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "phone": self.phone,
            "text": self.text,
            "website": self.website,
            "description": self.description,
            "available": self.available,
        }

    def format_for_user(self) -> str:
        """Format contact for display to user."""
        channels = [c for c in (self.phone, self.text) if c]
        contact = " / ".join(channels) if channels else (self.website or "")
        return f"• **{self.name}**: {contact} ({self.available})"


@dataclass(frozen=True)
class EmergencyContactDirectory:
    """
    Immutable, ordered collection of emergency contacts.

    The recommendation generator reads ``lifeline`` and ``emergency``
    by key, so every directory must define both, each with a phone.

    Raises:
        ValueError: If a required key is missing or has no phone,
            or a key repeats
    """

    contacts: tuple[EmergencyContact, ...]

    LIFELINE_KEY = "suicide_lifeline"
    EMERGENCY_KEY = "emergency"

    def __post_init__(self) -> None:
        keys = [c.key for c in self.contacts]
        if len(keys) != len(set(keys)):
            raise ValueError("Emergency contact keys must be unique")
        for required in (self.LIFELINE_KEY, self.EMERGENCY_KEY):
            if required not in keys:
                raise ValueError(f"Emergency contact directory requires '{required}'")
            # Recommendation wording quotes these numbers
            if not self.get(required).phone:
                raise ValueError(f"Emergency contact '{required}' requires a phone number")

    def get(self, key: str) -> Optional[EmergencyContact]:
        """Look up a contact by key."""
        for contact in self.contacts:
            if contact.key == key:
                return contact
        return None

    @property
    def lifeline(self) -> EmergencyContact:
        """Primary suicide and crisis lifeline."""
        return self.get(self.LIFELINE_KEY)

    @property
    def emergency(self) -> EmergencyContact:
        """General emergency services."""
        return self.get(self.EMERGENCY_KEY)

    def keys(self) -> list[str]:
        return [c.key for c in self.contacts]

    def format_for_display(self) -> str:
        """Format all contacts as a crisis resource block."""
        lines = ["**If you're in crisis or having thoughts of self-harm:**", ""]
        lines.extend(c.format_for_user() for c in self.contacts)
        lines.append("")
        lines.append("You don't have to face this alone. Professional support is available.")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {c.key: c.to_dict() for c in self.contacts}


# LEGAL_REVIEW_REQUIRED: Verify all numbers before production
DEFAULT_EMERGENCY_CONTACTS = EmergencyContactDirectory(
    contacts=(
        EmergencyContact(
            key="suicide_lifeline",
            name="988 Suicide & Crisis Lifeline",
            phone="988",
            text="Text HOME to 741741",
            website="https://suicidepreventionlifeline.org",
            description="National suicide prevention lifeline",
            available="24/7",
        ),
        EmergencyContact(
            key="crisis_text_line",
            name="Crisis Text Line",
            text="Text HOME to 741741",
            website="https://www.crisistextline.org",
            description="Text-based crisis support",
            available="24/7",
        ),
        EmergencyContact(
            key="emergency",
            name="Emergency Services",
            phone="911",
            description="For immediate danger or medical emergencies",
            available="24/7",
        ),
    ),
)
