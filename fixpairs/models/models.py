from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from fixpairs.core.constants import DEFAULT_STRATEGY
from fixpairs.core.utils import check_output_directory, is_same_file
from fixpairs.core.writer import get_output_paths


@dataclass
class PairingSummary:
    """Read counts from one re-pairing run."""

    num_forward: int = 0
    num_reverse: int = 0
    num_pairs: int = 0
    num_forward_unpaired: int = 0
    num_reverse_unpaired: int = 0

    @property
    def total_input(self) -> int:
        return self.num_forward + self.num_reverse

    @property
    def total_accounted(self) -> int:
        """Reads written to the outputs. Lower than total_input when duplicate identifiers were collapsed."""
        return 2 * self.num_pairs + self.num_forward_unpaired + self.num_reverse_unpaired


class FixPairsConfig(BaseModel):
    """Configuration for re-pairing a forward and a reverse FASTQ file."""

    forward: Path
    reverse: Path
    output_base: Path
    strategy: Literal["memory", "indexed"] = DEFAULT_STRATEGY

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_and_configure(self) -> FixPairsConfig:
        # Check input file existence
        if not self.forward.is_file():
            raise ValueError(f"The file specified as forward reads ({self.forward}) does not exist.")
        if not self.reverse.is_file():
            raise ValueError(f"The file specified as reverse reads ({self.reverse}) does not exist.")

        # Check output directory
        check_output_directory(str(self.output_base.parent))

        # Outputs are written while the inputs are still being read
        for output_path in self.output_paths:
            for input_path in (self.forward, self.reverse):
                if is_same_file(output_path, input_path):
                    raise ValueError(f"The output file {output_path} would overwrite the input file {input_path}.")

        return self

    @property
    def output_paths(self) -> tuple[Path, Path, Path]:
        """Paired forward, paired reverse and unpaired output paths."""
        return get_output_paths(self.output_base)
