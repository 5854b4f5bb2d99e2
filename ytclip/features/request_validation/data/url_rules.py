import hashlib
import re
from typing import Iterable, Optional
from urllib.parse import parse_qs, urlparse, ParseResult


class UrlRules:
    """
    Central logic for which URLs ytclip accepts and how a video is identified.
    """

    # Registrable domains; any subdomain (www., m., music.) is accepted too
    VIDEO_HOSTS = {"youtube.com", "youtu.be", "youtube-nocookie.com"}

    ALLOWED_SCHEMES = {"http", "https"}

    # Path prefixes that carry the id as the next segment
    ID_PATH_PREFIXES = ("embed", "shorts", "live", "v")

    ID_CHARS = re.compile(r"^[A-Za-z0-9_-]+$")

    @classmethod
    def parse(cls, url: str) -> ParseResult:
        """Parses the URL, assuming https:// when no scheme was typed."""
        candidate = url.strip()
        if "://" not in candidate:
            candidate = f"https://{candidate}"
        try:
            return urlparse(candidate)
        except ValueError:
            # Malformed netloc (e.g. unbalanced IPv6 brackets): treat as hostless
            return urlparse("")

    @classmethod
    def host_of(cls, url: str) -> str:
        return (cls.parse(url).hostname or "").lower()

    @classmethod
    def is_supported(cls, url: str, extra_hosts: Iterable[str] = ()) -> bool:
        parsed = cls.parse(url)
        if parsed.scheme.lower() not in cls.ALLOWED_SCHEMES:
            return False

        host = (parsed.hostname or "").lower()
        if not host:
            return False

        for domain in cls.VIDEO_HOSTS.union(h.lower() for h in extra_hosts):
            if host == domain or host.endswith("." + domain):
                return True
        return False

    @classmethod
    def extract_video_id(cls, url: str) -> Optional[str]:
        """
        Pulls the video id out of the common URL shapes:
            youtube.com/watch?v=ID, youtu.be/ID, youtube.com/{embed,shorts,live,v}/ID
        """
        parsed = cls.parse(url)
        host = (parsed.hostname or "").lower()
        segments = [s for s in parsed.path.split("/") if s]

        # 1. Query parameter
        candidate = parse_qs(parsed.query).get("v", [None])[0]

        # 2. Short links carry the id as the whole path
        if not candidate and (host == "youtu.be" or host.endswith(".youtu.be")) and segments:
            candidate = segments[0]

        # 3. Path-style links
        if not candidate and len(segments) >= 2 and segments[0] in cls.ID_PATH_PREFIXES:
            candidate = segments[1]

        if candidate and cls.ID_CHARS.match(candidate):
            return candidate
        return None

    @classmethod
    def fallback_id(cls, url: str) -> str:
        """Deterministic identifier for URLs without a recognisable video id."""
        digest = hashlib.sha256(url.strip().encode("utf-8")).hexdigest()
        return f"video_{digest[:8]}"
