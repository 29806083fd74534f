# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Step contract, catalog, factory and pipeline runner."""

from __future__ import annotations

from .base import BaseStep, NullStep, Step, StepConstructor, StepReference, StepResult
from .builtin import (
    BUILTIN_STEPS,
    CheckPathStep,
    IndexStep,
    MuLoaderStep,
    WpCliCommandsStep,
    WpCliConfigStep,
)
from .catalog import build_catalog, select_steps
from .factory import STEP_ENTRY_POINT_GROUP, StepFactory, factory_steps, resolve_reference
from .runner import PipelineOutcome, StepReport, Steps

__all__ = [
    "BUILTIN_STEPS",
    "STEP_ENTRY_POINT_GROUP",
    "BaseStep",
    "CheckPathStep",
    "IndexStep",
    "MuLoaderStep",
    "NullStep",
    "PipelineOutcome",
    "Step",
    "StepConstructor",
    "StepFactory",
    "StepReference",
    "StepReport",
    "StepResult",
    "Steps",
    "WpCliCommandsStep",
    "WpCliConfigStep",
    "build_catalog",
    "factory_steps",
    "resolve_reference",
    "select_steps",
]
