"""
Named registry of coordinate transformers.

A scene or session owns a registry and passes it (or the transformers in
it) to whatever needs coordinate conversion. Registration is
first-registered-wins per name.
"""

import logging
from typing import Dict, List

from geoanchor.core.errors import TransformerNotFoundError
from geoanchor.core.transformer import CoordinateTransformer

logger = logging.getLogger(__name__)

DEFAULT_NAME = "default"


class TransformerRegistry:
    """
    Holds one CoordinateTransformer per scene name.
    """

    def __init__(self) -> None:
        self._transformers: Dict[str, CoordinateTransformer] = {}

    def register(
        self,
        transformer: CoordinateTransformer,
        name: str = DEFAULT_NAME,
        replace: bool = False,
    ) -> CoordinateTransformer:
        """
        Register a transformer under a name.

        If the name is taken and ``replace`` is False, the existing
        transformer is kept and returned.

        Args:
            transformer: Transformer to register
            name: Scene name
            replace: Overwrite an existing registration

        Returns:
            The transformer that is registered under ``name`` afterwards
        """
        existing = self._transformers.get(name)
        if existing is not None and not replace:
            if existing is not transformer:
                logger.warning(
                    f"CoordinateTransformer '{name}' already registered, "
                    f"ignoring {transformer}"
                )
            return existing

        self._transformers[name] = transformer
        logger.info(f"New CoordinateTransformer '{name}' registered with {transformer}")
        return transformer

    def get(self, name: str = DEFAULT_NAME) -> CoordinateTransformer:
        """
        Look up a transformer.

        Raises:
            TransformerNotFoundError: If nothing is registered under ``name``
        """
        try:
            return self._transformers[name]
        except KeyError:
            raise TransformerNotFoundError(name) from None

    def unregister(self, name: str = DEFAULT_NAME) -> CoordinateTransformer:
        """
        Remove and return a transformer.

        Raises:
            TransformerNotFoundError: If nothing is registered under ``name``
        """
        try:
            return self._transformers.pop(name)
        except KeyError:
            raise TransformerNotFoundError(name) from None

    def names(self) -> List[str]:
        """Names of all registered transformers."""
        return list(self._transformers)

    def __contains__(self, name: object) -> bool:
        return name in self._transformers

    def __len__(self) -> int:
        return len(self._transformers)
