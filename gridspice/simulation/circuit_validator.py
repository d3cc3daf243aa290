"""
simulation/circuit_validator.py

Pre-simulation circuit validation with no Qt dependencies.
"""

from gridspice.models.element import ElementKind


def validate_circuit(model):
    """
    Validate circuit before simulation.

    Args:
        model: CircuitModel holding the placed elements and node groups

    Returns:
        (is_valid, errors, warnings) where:
            is_valid: bool - False if any errors found
            errors: list[str] - problems that block simulation
            warnings: list[str] - non-blocking issues
    """
    errors = []
    warnings = []

    elements = list(model.registry)

    # 1. Circuit must have elements beyond Ground
    non_ground = [e for e in elements if e.kind is not ElementKind.GROUND]
    if not non_ground:
        errors.append("Circuit has no elements. Add at least one element to simulate.")
        return False, errors, warnings

    # 2. Must have a ground on a wire
    grounds = [e for e in elements if e.kind is ElementKind.GROUND]
    if not grounds:
        errors.append("Circuit has no ground. Every circuit requires a ground (node 0).")
    else:
        ground = grounds[0]
        ground_group = model.find_group(ground.terminals[0])
        if ground_group is None:
            errors.append(
                f"Ground {ground.element_id} is not connected to any wire. "
                f"Route a wire to its terminal."
            )
        for extra in grounds[1:]:
            extra_group = model.find_group(extra.terminals[0])
            if extra_group != ground_group:
                warnings.append(
                    f"Ground {extra.element_id} is not on the reference node and will be ignored."
                )

    # 3. Dangling terminals
    for element in non_ground:
        unconnected = [i for i, terminal in enumerate(element.terminals)
                       if model.find_group(terminal) is None]
        if len(unconnected) == len(element.terminals):
            warnings.append(
                f"{element.kind.spice_symbol}{element.element_id} ({element.kind.display_name}) "
                f"has no connections and will be left out of the netlist."
            )
        elif unconnected:
            warnings.append(
                f"{element.kind.spice_symbol}{element.element_id} ({element.kind.display_name}) "
                f"has unconnected terminal(s): {unconnected} and will be left out of the netlist."
            )

    # 4. Sources
    sources = [e for e in non_ground
               if e.kind in (ElementKind.DC_VOLTAGE_SOURCE, ElementKind.DC_CURRENT_SOURCE)]
    if not sources:
        warnings.append(
            "Circuit has no voltage or current sources. "
            "The simulation may not produce meaningful results."
        )

    is_valid = len(errors) == 0
    return is_valid, errors, warnings
