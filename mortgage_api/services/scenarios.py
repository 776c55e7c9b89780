# This project was developed with assistance from AI tools.
"""Saved scenario persistence.

All scenarios live as one JSON array under a single key of the configured
``KeyValueStore``. Every operation is a read-modify-write of that array.
"""

import logging
import uuid
from datetime import UTC, datetime

from pydantic import TypeAdapter, ValidationError

from ..schemas.calculator import AmortizationEntry, CalculationResult, LoanInputs
from ..schemas.scenario import SavedScenario
from .kv_store import KeyValueStore, get_key_value_store

logger = logging.getLogger(__name__)

STORAGE_KEY = "mortgage-calculator-scenarios"

_scenario_list = TypeAdapter(list[SavedScenario])


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_scenario_id() -> str:
    return f"scenario_{uuid.uuid4().hex}"


class ScenarioService:
    """CRUD over the saved-scenario document."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    async def _write(self, scenarios: list[SavedScenario]) -> None:
        await self._store.set(STORAGE_KEY, _scenario_list.dump_json(scenarios).decode("utf-8"))

    async def get_all_scenarios(self) -> list[SavedScenario]:
        """Return every saved scenario; corrupt data reads as empty."""
        data = await self._store.get(STORAGE_KEY)
        if not data:
            return []
        try:
            return _scenario_list.validate_json(data)
        except ValidationError:
            logger.error("Stored scenarios are unreadable, treating as empty", exc_info=True)
            return []

    async def get_scenario(self, scenario_id: str) -> SavedScenario | None:
        for scenario in await self.get_all_scenarios():
            if scenario.id == scenario_id:
                return scenario
        return None

    async def save_scenario(
        self,
        name: str,
        inputs: LoanInputs,
        calculation: CalculationResult,
        amortization: list[AmortizationEntry],
    ) -> SavedScenario:
        """Append a new scenario and return it."""
        scenarios = await self.get_all_scenarios()
        now = _utcnow()
        scenario = SavedScenario(
            id=_new_scenario_id(),
            name=name,
            inputs=inputs,
            calculation=calculation,
            amortization=amortization,
            created_at=now,
            updated_at=now,
        )
        scenarios.append(scenario)
        await self._write(scenarios)
        logger.info("Saved scenario %s (%s)", scenario.id, name)
        return scenario

    async def update_scenario(
        self,
        scenario_id: str,
        name: str,
        inputs: LoanInputs,
        calculation: CalculationResult,
        amortization: list[AmortizationEntry],
    ) -> SavedScenario | None:
        """Replace a scenario's contents, keeping its id and created_at.

        Returns None if no scenario has ``scenario_id``.
        """
        scenarios = await self.get_all_scenarios()
        for index, existing in enumerate(scenarios):
            if existing.id == scenario_id:
                break
        else:
            return None

        updated = existing.model_copy(
            update={
                "name": name,
                "inputs": inputs,
                "calculation": calculation,
                "amortization": amortization,
                "updated_at": _utcnow(),
            }
        )
        scenarios[index] = updated
        await self._write(scenarios)
        logger.info("Updated scenario %s", scenario_id)
        return updated

    async def delete_scenario(self, scenario_id: str) -> bool:
        """Remove a scenario. Returns False if it did not exist."""
        scenarios = await self.get_all_scenarios()
        remaining = [s for s in scenarios if s.id != scenario_id]
        if len(remaining) == len(scenarios):
            return False
        await self._write(remaining)
        logger.info("Deleted scenario %s", scenario_id)
        return True

    async def clear_all_scenarios(self) -> None:
        await self._store.remove(STORAGE_KEY)
        logger.info("Cleared all scenarios")

    async def export_scenarios(self) -> str:
        """Serialize every scenario as indented JSON."""
        scenarios = await self.get_all_scenarios()
        return _scenario_list.dump_json(scenarios, indent=2).decode("utf-8")

    async def import_scenarios(self, json_data: str | bytes) -> list[SavedScenario] | None:
        """Replace all scenarios with a JSON array produced by ``export_scenarios``.

        Returns the imported scenarios, or None (store untouched) when the
        data is not a valid scenario array.
        """
        try:
            scenarios = _scenario_list.validate_json(json_data)
        except ValidationError:
            logger.warning("Rejected scenario import", exc_info=True)
            return None
        await self._write(scenarios)
        logger.info("Imported %d scenarios", len(scenarios))
        return scenarios


def get_scenario_service() -> ScenarioService:
    """FastAPI dependency returning a service over the configured store."""
    return ScenarioService(get_key_value_store())
