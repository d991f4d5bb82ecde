"""Common shape of the project strategies: validate → prompt → generate → parse → write."""

from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from workflows.db.models import Project
from workflows.prompts import fill_prompt
from workflows.providers import ChatProvider

from ..errors import EmptyResponseError, PipelineStage, ValidationError
from ..parser import parse_llm_json
from ..repository import ProjectRepository

logger = logging.getLogger(__name__)


@dataclass
class StrategyContext:
    user_input: Optional[str] = None
    existing_project: Optional[Project] = None
    additional_data: Optional[dict[str, Any]] = None


@dataclass
class ChangeMetadata:
    tasks_added: int = 0
    tasks_removed: int = 0
    fields_updated: list[str] = field(default_factory=list)


@dataclass
class StrategyResult:
    """Persisted project(s) plus what changed; metadata never rides on the ORM entity."""

    action: str
    projects: list[Project]
    metadata: ChangeMetadata
    is_single: bool = True

    @property
    def project(self) -> Project:
        return self.projects[0]


def project_snapshot(project: Project) -> dict[str, Any]:
    """Current project state as sent to the LLM, using the field names the prompts document."""
    return {
        "name": project.name,
        "priority": project.priority,
        "backTech": project.backtech,
        "frontTech": project.fronttech,
        "cloudTech": project.cloud_tech,
        "sprintsQuantity": project.sprints_quantity,
        "endDate": project.end_date,
        "Tasks": [
            {
                "name": t.name,
                "description": t.description,
                "assignedTo": t.assigned_to,
                "sprint": t.sprint,
            }
            for t in (project.tasks or [])
        ],
    }


class SpecStrategy(ABC):
    """One way of turning a generation call into persisted projects."""

    action: str
    prompt: str

    def __init__(self, repo: ProjectRepository, chat: ChatProvider):
        self.repo = repo
        self.chat = chat

    def validate(self, context: StrategyContext) -> None:
        if context is None:
            raise ValidationError(PipelineStage.VALIDATE, "Strategy context is required")

    def build_prompt(self, context: StrategyContext) -> str:
        prompt = fill_prompt(self.prompt, today=date.today().strftime("%d/%m/%Y"))
        if context.user_input:
            prompt += f"\n\nUser idea: {context.user_input}"
        if context.existing_project is not None:
            snapshot = json.dumps(project_snapshot(context.existing_project), indent=2, ensure_ascii=False)
            prompt += f"\n\nCurrent project data:\n{snapshot}"
        if context.additional_data:
            extra = json.dumps(context.additional_data, indent=2, ensure_ascii=False, default=str)
            prompt += f"\n\nAdditional context:\n{extra}"
        return prompt

    async def generate(self, prompt: str) -> str:
        """Single generation call; blank output is a hard failure before any parsing or writing."""
        text = await self.chat.generate(prompt)
        if text is None or not str(text).strip():
            logger.warning("%s strategy: generation provider returned an empty response", self.action)
            raise EmptyResponseError()
        return str(text)

    async def parse_response(self, raw: str) -> Any:
        # CPU-bound repair/parse runs in a worker thread to keep the event loop free
        return await asyncio.to_thread(parse_llm_json, raw)

    @abstractmethod
    async def execute(self, context: StrategyContext) -> StrategyResult:
        pass
