"""Read CloudFormation outputs of a deployed stack from a JSON file.

The file is the ``Outputs`` list from ``aws cloudformation describe-stacks``,
for example::

    aws cloudformation describe-stacks --stack-name EntryCrudStack-dev \
        --query "Stacks[0].Outputs" > outputs.json
"""

import json
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class StackOutputsEntry(BaseModel):
    """One element of the CloudFormation outputs list."""

    model_config = ConfigDict(extra="ignore")

    output_key: str = Field(alias="OutputKey")
    output_value: str = Field(alias="OutputValue")


class StackOutputs(BaseModel):
    """Stack outputs the integration tests care about."""

    api_url: str = ""
    table_name: str = ""


def load_stack_outputs(path: Union[str, Path] = "outputs.json") -> StackOutputs:
    """Parse the outputs file; unknown keys are ignored, missing ones stay empty."""
    raw = json.loads(Path(path).read_text())
    entries: List[StackOutputsEntry] = [StackOutputsEntry.model_validate(e) for e in raw]

    outputs = StackOutputs()
    for entry in entries:
        if entry.output_key == "Table":
            outputs.table_name = entry.output_value
        elif entry.output_key == "API":
            outputs.api_url = entry.output_value
    return outputs
