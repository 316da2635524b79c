'''
.------..------..------..------..------..------.
|s.--. ||e.--. ||q.--. ||g.--. ||e.--. ||n.--. |
| :/\: || (\/) || (\/) || :/\: || (\/) || :(): |
| :\/: || :\/: || :\/: || :\/: || :\/: || ()() |
| '--'s|| '--'e|| '--'q|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from lazyseq import from_function, LazySequence
from typing import Any, Dict, Optional

PROVIDER_KEY = "_gen_provider"


class Generator:
    """schema interpreter. one instance produces one reproducible stream of records."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[str, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Dict = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config[PROVIDER_KEY]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "counter":
            name = config.get("name", "default")
            value = self._counters.get(name, config.get("start", 1))
            self._counters[name] = value + 1
            return value

        elif provider == "literal":
            if "value" not in config:
                raise ValueError(f"{PROVIDER_KEY} 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown {PROVIDER_KEY}: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if PROVIDER_KEY in schema:
                return self._resolve_provider(schema, current_context)

            # build the record field by field so refs can see earlier siblings
            generated_obj = {}
            for k, v in schema.items():
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def _records(self):
        # a fresh generator per pass keeps seeded sequences restartable
        generator = Generator(self._seed)
        while True:
            yield generator.create(self._schema)

    def stream(self) -> LazySequence:
        """an endless sequence of records"""
        return from_function(self._records, infinite=True)

    def take(self, count: int) -> LazySequence:
        return self.stream().head(count)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
