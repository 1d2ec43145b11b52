"""Skin loader - reads and validates skin files."""

import logging
import re
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .schema import SkinSchema

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r'\{tokens\.([^}]+)\}')


class SkinLoader:
    """Loads and validates skin files."""

    def load_skin(self, skin_path: Path) -> Optional[Dict[str, Any]]:
        """Load and validate a skin file.

        Args:
            skin_path: Path to YAML skin file

        Returns:
            Validated skin dict or None if invalid
        """
        try:
            with open(skin_path, 'r', encoding='utf-8') as f:
                skin_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning("YAML parse error in %s: %s", skin_path.name, e)
            return None
        except FileNotFoundError:
            logger.warning("Skin file not found: %s", skin_path)
            return None
        except OSError as e:
            logger.warning("Error reading skin %s: %s", skin_path.name, e)
            return None

        if not skin_data:
            logger.warning("Empty skin file: %s", skin_path)
            return None

        valid, error = SkinSchema.validate_structure(skin_data)
        if not valid:
            logger.warning("Invalid skin %s: %s", skin_path.name, error)
            return None

        return self.resolve_tokens(skin_data)

    def resolve_tokens(self, skin_data: Dict[str, Any]) -> Dict[str, Any]:
        """Resolve token references like {tokens.colors.primary}.

        A value that is exactly one reference takes the token's own type
        (so opacities stay floats); references embedded in longer strings
        are substituted as text. Unknown references are left in place.
        """
        tokens = skin_data.get('tokens', {}) or {}

        def lookup(path: str) -> Any:
            value = tokens
            for part in path.split('.'):
                if isinstance(value, dict) and part in value:
                    value = value[part]
                else:
                    logger.warning("Token reference not found: %s", path)
                    return None
            return value

        def resolve_value(value: Any) -> Any:
            if isinstance(value, str):
                matches = TOKEN_PATTERN.findall(value)
                for match in matches:
                    token_value = lookup(match)
                    if token_value is None:
                        continue
                    placeholder = f"{{tokens.{match}}}"
                    if value == placeholder:
                        return token_value
                    value = value.replace(placeholder, str(token_value))
                return value
            if isinstance(value, dict):
                return {k: resolve_value(v) for k, v in value.items()}
            if isinstance(value, list):
                return [resolve_value(item) for item in value]
            return value

        # The tokens section itself is kept as-is.
        return {
            key: value if key == 'tokens' else resolve_value(value)
            for key, value in skin_data.items()
        }

    def list_available_skins(self, skin_dirs: list[Path]) -> list[Dict[str, Any]]:
        """List all valid skins found in the given directories.

        Returns:
            List of skin metadata dicts (name, author, version, path, data)
        """
        skins = []

        for skin_dir in skin_dirs:
            if not skin_dir.exists():
                continue

            for skin_file in sorted(skin_dir.glob('*.yaml')):
                skin_data = self.load_skin(skin_file)
                if skin_data:
                    skins.append({
                        'name': skin_data.get('name', skin_file.stem),
                        'author': skin_data.get('author', 'Unknown'),
                        'version': str(skin_data.get('version', '1.0')),
                        'path': skin_file,
                        'data': skin_data
                    })

        return skins
