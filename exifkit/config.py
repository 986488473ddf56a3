"""Decoder configuration."""

import json
from dataclasses import dataclass


@dataclass
class DecodeConfig:
    """Which tag dictionary checks produce warnings.

    Both checks only ever add warnings; the decoded entries are the same
    whichever way they are set.
    """

    check_formats: bool = True
    check_counts: bool = True

    @classmethod
    def default(cls) -> 'DecodeConfig':
        """Return the built-in defaults (every check enabled)."""
        return cls()

    @classmethod
    def from_json(cls, path) -> 'DecodeConfig':
        """Load settings from a JSON file.

        JSON format::

            {
              "check_formats": true,
              "check_counts": false
            }

        Both keys are optional; omitted keys keep their defaults and unknown
        keys are ignored. Malformed JSON raises ``ValueError``.
        """
        with open(str(path), 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f'{path}: expected a JSON object')

        config = cls.default()
        for key in ('check_formats', 'check_counts'):
            if key in data:
                setattr(config, key, bool(data[key]))
        return config
