"""Interactive menu for the Delivery Path Optimizer.

This shell turns typed menu choices into calls on
DeliveryPlannerService and prints the results. Parsing numbers and
reporting errors happen here; the service never sees raw text.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import get_config
from .container import get_container
from .domain.errors import DuplicateLocationError, LocationNotFoundError
from .domain.models import DeliveryPlan, DeliverySimulation
from .services import DeliveryPlannerService

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = (
    "\n=== Delivery Path Optimizer Menu ===\n"
    "1. Add Location\n2. Remove Location\n3. Add Route\n4. Remove Route\n"
    "5. Show Locations\n6. Optimize Delivery Plan\n7. Simulate Route\n8. Exit"
)

EXIT_CHOICE = 8


def format_plan(plan: DeliveryPlan) -> str:
    """Render a delivery plan, one line per location."""
    lines = [f"\n--- Optimized Delivery Plan from '{plan.source}' ---"]
    for estimate in plan.estimates:
        if estimate.is_reachable:
            lines.append(
                f"{estimate.location}: ETA = {estimate.distance}, "
                f"Cost = {estimate.cost}"
            )
        else:
            lines.append(f"{estimate.location}: Unreachable")
    return "\n".join(lines)


def format_simulation(simulation: DeliverySimulation) -> str:
    """Render the visitation order of a simulated delivery run."""
    lines = ["\n--- Route Simulation ---"]
    lines.extend(f"Delivering to: {name}" for name in simulation.visits)
    return "\n".join(lines)


def format_locations(names: tuple[str, ...]) -> str:
    """Render location names as a bulleted list."""
    lines = ["\nLocations:"]
    lines.extend(f"- {name}" for name in names)
    return "\n".join(lines)


class DeliveryShell:
    """Menu loop driving a DeliveryPlannerService.

    Args:
        planner: The service receiving parsed commands.
        input_fn: Reads one line after showing a prompt (``input`` by default).
        output_fn: Writes one message (``print`` by default).
        prompt: Prompt shown before reading a menu choice.
    """

    def __init__(
        self,
        planner: DeliveryPlannerService,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
        prompt: str = "Enter choice: ",
    ) -> None:
        self.planner = planner
        self._input = input_fn or input
        self._output = output_fn or print
        self._prompt = prompt
        self._handlers: dict[int, Callable[[], None]] = {
            1: self._add_location,
            2: self._remove_location,
            3: self._add_route,
            4: self._remove_route,
            5: self._show_locations,
            6: self._optimize,
            7: self._simulate,
        }

    def run(self) -> None:
        """Loop until the user picks Exit or input runs out."""
        while True:
            self._output(MENU)
            try:
                raw = self._input(self._prompt)
            except EOFError:
                self._output("Exiting...")
                return

            try:
                choice = int(raw.strip())
            except ValueError:
                self._output("Invalid input. Please enter a number.")
                continue

            if choice == EXIT_CHOICE:
                self._output("Exiting...")
                return

            handler = self._handlers.get(choice)
            if handler is None:
                self._output("Invalid choice. Try again.")
                continue

            try:
                handler()
            except EOFError:
                self._output("Exiting...")
                return

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _add_location(self) -> None:
        name = self._ask("Enter location name: ")
        try:
            self.planner.add_location(name)
        except DuplicateLocationError:
            self._output("Location already exists.")
            return
        self._output(f"Location '{name}' added.")

    def _remove_location(self) -> None:
        name = self._ask("Enter location name to remove: ")
        try:
            self.planner.remove_location(name)
        except LocationNotFoundError:
            self._output("Location not found.")
            return
        self._output(f"Location '{name}' removed.")

    def _add_route(self) -> None:
        origin = self._ask("Enter FROM location: ")
        destination = self._ask("Enter TO location: ")
        raw_cost = self._ask("Enter cost/time: ")
        try:
            cost = int(raw_cost)
        except ValueError:
            self._output("Invalid cost input.")
            return

        try:
            self.planner.add_route(origin, destination, cost)
        except LocationNotFoundError:
            self._output("One or both locations not found.")
            return
        self._output(
            f"Route from '{origin}' to '{destination}' added with cost {cost}."
        )

    def _remove_route(self) -> None:
        origin = self._ask("Enter FROM location: ")
        destination = self._ask("Enter TO location: ")
        try:
            self.planner.remove_route(origin, destination)
        except LocationNotFoundError:
            self._output("One or both locations not found.")
            return
        self._output(f"Route between '{origin}' and '{destination}' removed.")

    def _show_locations(self) -> None:
        self._output(format_locations(self.planner.list_locations()))

    def _optimize(self) -> None:
        source = self._ask("Enter starting location: ")
        try:
            plan = self.planner.optimize_delivery_plan(source)
        except LocationNotFoundError:
            self._output("Starting location not found.")
            return
        self._output(format_plan(plan))

    def _simulate(self) -> None:
        source = self._ask("Enter starting location for simulation: ")
        try:
            simulation = self.planner.simulate_delivery(source)
        except LocationNotFoundError:
            self._output("Starting location not found.")
            return
        self._output(format_simulation(simulation))


def main(planner: Optional[DeliveryPlannerService] = None) -> None:
    config = get_config()
    config.observability.apply()

    if planner is None:
        planner = get_container().resolve(DeliveryPlannerService)

    logger.debug("Starting delivery shell")
    DeliveryShell(planner, prompt=config.shell.prompt).run()


if __name__ == "__main__":
    main()
