"""Token replacement for user-configurable text.

Replaces ``[type:name]`` placeholders (e.g. ``[current-user:name]``,
``[node:title]``) with values produced by registered token providers.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

TOKEN_PATTERN = re.compile(r"\[([\w-]+):([^\[\]\s]+)\]")

# (token name, data object for the token type) -> replacement or None
TokenProvider = Callable[[str, Any], Optional[str]]


class TokenService:
    """Registry of token providers plus the replacement routine.

    Providers are looked up by token type. A token is replaced only when a
    provider is registered for its type, the data mapping holds an object
    for that type (or the provider accepts None) and the provider returns a
    value. Everything else is left in place unless ``clear`` is set.
    """

    def __init__(self):
        self._providers: Dict[str, TokenProvider] = {}
        self._global_types: set[str] = set()

    def register(
        self, token_type: str, provider: TokenProvider, needs_data: bool = True
    ) -> None:
        """Register a provider for a token type.

        Args:
            token_type: Token type prefix, e.g. "current-user".
            provider: Callable returning the replacement for a token name.
            needs_data: False for types such as "site" that resolve
                without a data object.
        """
        self._providers[token_type] = provider
        if not needs_data:
            self._global_types.add(token_type)

    @property
    def token_types(self) -> List[str]:
        return sorted(self._providers)

    def scan(self, text: str) -> Dict[str, List[str]]:
        """Return the token names found in text, grouped by type."""
        found: Dict[str, List[str]] = {}
        for token_type, name in TOKEN_PATTERN.findall(text):
            names = found.setdefault(token_type, [])
            if name not in names:
                names.append(name)
        return found

    def replace(
        self,
        text: str,
        data: Optional[Mapping[str, Any]] = None,
        clear: bool = False,
    ) -> str:
        """Replace tokens in text.

        Args:
            text: Text containing ``[type:name]`` tokens.
            data: Objects keyed by token type (e.g. {"node": group}).
            clear: Remove tokens that cannot be resolved instead of keeping them.

        Returns:
            Text with resolved tokens substituted as plain text.
        """
        data = data or {}
        unresolved: List[str] = []

        def _substitute(match: "re.Match[str]") -> str:
            token_type, name = match.group(1), match.group(2)
            value = self._resolve(token_type, name, data)
            if value is None:
                unresolved.append(match.group(0))
                return "" if clear else match.group(0)
            return value

        result = TOKEN_PATTERN.sub(_substitute, text)
        if unresolved:
            logger.debug("unresolved_tokens", tokens=unresolved, cleared=clear)
        return result

    def _resolve(
        self, token_type: str, name: str, data: Mapping[str, Any]
    ) -> Optional[str]:
        provider = self._providers.get(token_type)
        if provider is None:
            return None
        if token_type in self._global_types:
            subject = data.get(token_type)
        elif token_type in data:
            subject = data[token_type]
        else:
            return None
        value = provider(name, subject)
        return None if value is None else str(value)
