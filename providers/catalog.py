"""Model catalogs: curated lookups and the accept-anything fallback chain."""

from collections.abc import Mapping

from loguru import logger
from pydantic import BaseModel, ConfigDict

from providers.base import (
    ALL_CAPABILITIES,
    Capability,
    ModelDescriptor,
    ModelFamily,
    ModelRole,
)
from providers.exceptions import ModelNotFoundError
from providers.model_utils import classify_model_role, parse_model_name


class ModelSpec(BaseModel):
    """Catalog entry describing a known model."""

    model_config = ConfigDict(frozen=True)

    role: ModelRole = ModelRole.completions
    capabilities: frozenset[Capability]
    family: ModelFamily = ModelFamily.generic


class ModelCatalog:
    """
    Base catalog.

    ``find_model`` signals "not found" by returning None so that callers can
    branch on it; ``get_model`` is the raising variant for callers that have
    no fallback.
    """

    def find_model(self, model_name: str) -> ModelDescriptor | None:
        raise NotImplementedError

    def get_model(self, model_name: str) -> ModelDescriptor:
        model = self.find_model(model_name)
        if model is None:
            raise ModelNotFoundError(f'Model "{model_name}" not found.')
        return model

    def get_models(self) -> dict[str, ModelSpec]:
        return {}


class StaticModelCatalog(ModelCatalog):
    """Catalog backed by an explicit, curated name -> ModelSpec mapping."""

    def __init__(self, models: Mapping[str, ModelSpec]):
        self._models = dict(models)

    def _lookup_key(self, name: str) -> str | None:
        if name in self._models:
            return name
        # Size variants such as "llama3.2:3b" resolve to their base entry
        if ":" in name:
            base = name.split(":", 1)[0]
            if base in self._models:
                return base
        return None

    def find_model(self, model_name: str) -> ModelDescriptor | None:
        parsed = parse_model_name(model_name)
        key = self._lookup_key(parsed.name)
        if key is None:
            return None
        spec = self._models[key]
        return ModelDescriptor(
            name=parsed.name,
            role=spec.role,
            capabilities=spec.capabilities,
            options=parsed.options,
            family=spec.family,
        )

    def get_models(self) -> dict[str, ModelSpec]:
        return dict(self._models)


class FallbackModelCatalog(ModelCatalog):
    """
    Catalog that accepts any model name, optionally trying a primary first.

    A descriptor from the primary catalog is returned as-is. When the primary
    has no entry (or there is no primary), the name is classified by
    convention: names containing "embed" become embeddings models, all others
    completions models. Fallback models receive every capability since the
    real set is unknown.
    """

    def __init__(
        self,
        primary: ModelCatalog | None = None,
        family: ModelFamily = ModelFamily.generic,
    ):
        self._primary = primary
        self._family = family

    def find_model(self, model_name: str) -> ModelDescriptor:
        if self._primary is not None:
            try:
                model = self._primary.find_model(model_name)
            except ModelNotFoundError:
                model = None
            if model is not None:
                return model
            logger.debug(
                "CATALOG: '{}' not in primary catalog, using fallback", model_name
            )

        parsed = parse_model_name(model_name)
        return ModelDescriptor(
            name=parsed.name,
            role=classify_model_role(parsed.name),
            capabilities=ALL_CAPABILITIES,
            options=parsed.options,
            family=self._family,
        )

    def get_model(self, model_name: str) -> ModelDescriptor:
        return self.find_model(model_name)
