import json
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Small key-value file holding string values (the Gemini API key lives
    under CREDENTIAL_KEY). The file is created on first write.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except ValueError as exc:
            # unreadable file; the next set() rewrites it
            logger.warning("Ignoring unreadable credential file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring credential file %s: not a JSON object", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
        os.replace(tmp_path, self.path)
        try:
            os.chmod(self.path, 0o600)
        except OSError as exc:
            logger.warning("Could not restrict permissions on %s: %s", self.path, exc)
        logger.info("Stored value for key=%s in %s", key, self.path)
