"""Account models appended to orders and assets by the API."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class OpenSeaUser:
    """Public profile of an OpenSea user."""
    username: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"username": self.username}


@dataclass
class OpenSeaAccount:
    """OpenSea account object, carrying profile images and usernames.

    Orders reference makers and takers by raw address string; this object is
    the enriched view the API appends alongside.
    """
    address: str
    config: str = ""
    profile_img_url: str = ""
    user: Optional[OpenSeaUser] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "config": self.config,
            "profile_img_url": self.profile_img_url,
            "user": self.user.to_dict() if self.user else None,
        }
