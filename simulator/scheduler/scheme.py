"""Registry of the document kinds understood by the scheduler config decoder."""

import logging
from typing import Optional

import yaml
from pydantic import ValidationError

from simulator.constants import SCHEDULER_CONFIG_API_VERSION, SCHEDULER_CONFIG_KIND
from simulator.scheduler.base import SchemaModel
from simulator.scheduler.plugin_args import PLUGIN_ARGS
from simulator.scheduler.types import RawKubeSchedulerConfiguration

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Exception raised when a scheduler configuration document cannot be decoded."""

    def __init__(self, reason: str, element: Optional[str] = None, detail: str = ""):
        self.reason = reason
        self.element = element
        self.detail = detail
        message = reason
        if element:
            message += f": {element}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class Scheme:
    """Maps ``(apiVersion, kind)`` pairs to the models their documents decode into."""

    def __init__(self):
        self._known_types: dict[tuple[str, str], type[SchemaModel]] = {}

    def add_known_type(
        self, api_version: str, kind: str, model: type[SchemaModel]
    ) -> None:
        self._known_types[(api_version, kind)] = model

    def recognizes(self, api_version: str, kind: str) -> bool:
        return (api_version, kind) in self._known_types

    def decode(self, data: bytes) -> SchemaModel:
        """Decode a YAML or JSON document into its registered model.

        Args:
            data: Serialized document

        Returns:
            SchemaModel: Instance of the model registered for the document's kind

        Raises:
            DecodeError: If the document does not parse, its kind is not
                registered, or it does not match the registered model
        """
        try:
            document = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise DecodeError("load an object from buffer", detail=str(e)) from e

        if not isinstance(document, dict):
            raise DecodeError(
                "load an object from buffer", detail="document is not a mapping"
            )

        api_version = document.get("apiVersion")
        kind = document.get("kind")
        if not isinstance(api_version, str) or not isinstance(kind, str):
            raise DecodeError(
                "unrecognized document", f"apiVersion={api_version!r}, kind={kind!r}"
            )
        model = self._known_types.get((api_version, kind))
        if model is None:
            raise DecodeError(
                "unrecognized document", f"apiVersion={api_version}, kind={kind}"
            )

        logger.debug("Decoding %s document", kind)
        try:
            return model.model_validate(document)
        except ValidationError as e:
            raise DecodeError("load an object from buffer", kind, str(e)) from e


SCHEME = Scheme()
SCHEME.add_known_type(
    SCHEDULER_CONFIG_API_VERSION, SCHEDULER_CONFIG_KIND, RawKubeSchedulerConfiguration
)
for _plugin_name, _schema in PLUGIN_ARGS:
    SCHEME.add_known_type(
        SCHEDULER_CONFIG_API_VERSION, PLUGIN_ARGS.kind_for(_plugin_name), _schema
    )
