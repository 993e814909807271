"""Generate fake records lazily using Faker library."""

import itertools
import logging
from typing import Dict, Iterator, Optional, Sequence

from faker import Faker

from .sequence import LazySequence


class FakeRecords(LazySequence):
    """Unbounded stream of fake records, one Faker call per field."""

    DEFAULT_FIELDS = ("name", "email", "city")

    def __init__(
        self,
        seed: int = 42,
        fields: Sequence[str] = DEFAULT_FIELDS,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the record source.

        Faker itself is only created once a traversal produces its first
        record.

        Args:
            seed: Random seed for reproducibility, applied per traversal
            fields: Faker provider names, one column each
            logger: Logger instance
        """
        super().__init__(logger)
        self.seed = seed
        self.fields = tuple(fields)

    def _produce(self) -> Iterator[Dict]:
        faker = Faker()
        faker.seed_instance(self.seed)
        self._logger.debug(f"Generating fake records with fields {', '.join(self.fields)}")

        for record_id in itertools.count():
            record = {"id": record_id}
            for name in self.fields:
                record[name] = getattr(faker, name)()
            yield record

            if (record_id + 1) % 10000 == 0:
                self._logger.debug(f"Generated {record_id + 1:,} records...")
