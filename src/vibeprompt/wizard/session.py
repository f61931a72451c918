"""Wizard session: step transitions that trigger assistant requests."""

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait as wait_futures
from typing import Any, Callable, Optional

from vibeprompt.catalogs import recommend_stack
from vibeprompt.core.logging import get_logger
from vibeprompt.prompts import FEATURE_SUGGESTION_MIN_DESCRIPTION
from vibeprompt.schemas.catalog import TechOptionCatalog
from vibeprompt.schemas.project import TechStack
from vibeprompt.services.assistant import ProjectAssistant
from vibeprompt.wizard.state import RequestPurpose, RequestTracker, WizardState, WizardStep

logger = get_logger("vibeprompt.wizard")


class WizardSession:
    """
    Drives a WizardState and the assistant requests its steps need.

    Requests fire only on step entry or an explicit user action, never on a
    timer, and are never retried. Each runs on the executor; its result is
    applied under the session lock only if no newer request for the same
    purpose has been issued since.
    """

    def __init__(
        self,
        assistant: ProjectAssistant,
        state: Optional[WizardState] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize session.

        Args:
            assistant: Assistant used for every model request
            state: Existing wizard state (a fresh one when omitted)
            executor: Executor running requests; the session owns and shuts
                down the default thread pool
        """
        self.assistant = assistant
        self.state = state or WizardState()
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(max_workers=4, thread_name_prefix="vibeprompt")
        self.tracker = RequestTracker()
        self.lock = threading.RLock()
        self._futures: list[Future] = []

        self.guidance = ""
        self.suggestions: list[str] = []
        self.enhanced_description = ""
        self.recommendation = ""
        self.recommended_stack: Optional[TechStack] = None
        self.final_spec = ""
        self._catalog_project_type: Optional[str] = None

    @property
    def catalog(self) -> Optional[TechOptionCatalog]:
        return self.state.catalog

    def is_loading(self, purpose: Optional[RequestPurpose] = None) -> bool:
        return self.tracker.is_loading(purpose)

    def _submit(
        self,
        purpose: RequestPurpose,
        call: Callable[[], Any],
        apply: Callable[[Any], None],
    ) -> Future:
        """
        Run ``call`` on the executor and hand its result to ``apply``.

        The returned future resolves to True when the result was applied and
        False when a newer request for the same purpose made it stale.
        """
        token = self.tracker.begin(purpose)

        def job() -> bool:
            try:
                result = call()
            except Exception:
                self.tracker.finish(purpose, token)
                raise
            with self.lock:
                if not self.tracker.finish(purpose, token):
                    logger.debug(
                        f"Discarding stale {purpose.value} response",
                        context={"event_type": "stale_response", "purpose": purpose.value},
                    )
                    return False
                apply(result)
                return True

        future = self.executor.submit(job)
        with self.lock:
            self._futures = [f for f in self._futures if not f.done()]
            self._futures.append(future)
        return future

    def wait(self) -> None:
        """Block until every outstanding request, including chained ones, has finished."""
        while True:
            with self.lock:
                pending = [f for f in self._futures if not f.done()]
            if not pending:
                return
            wait_futures(pending)

    # Step transitions

    def advance(self) -> bool:
        """
        Advance one step and fire the new step's requests.

        Returns:
            False if the current step's gate is closed
        """
        with self.lock:
            if not self.state.advance():
                return False
            step = self.state.step
        self._on_enter(step)
        return True

    def retreat(self) -> bool:
        with self.lock:
            return self.state.retreat()

    def restart(self) -> None:
        """Reset answers and drop every outstanding request's result."""
        with self.lock:
            for purpose in RequestPurpose:
                self.tracker.invalidate(purpose)
            self.state.restart()
            self.guidance = ""
            self.suggestions = []
            self.enhanced_description = ""
            self.recommendation = ""
            self.recommended_stack = None
            self.final_spec = ""
            self._catalog_project_type = None

    def _on_enter(self, step: WizardStep) -> None:
        if step == WizardStep.FEATURES:
            if len(self.state.answer.description) > FEATURE_SUGGESTION_MIN_DESCRIPTION:
                self.request_feature_suggestions()
        elif step == WizardStep.TECH_STACK:
            if self.catalog is None or self._catalog_project_type != self.state.answer.project_type:
                self.request_tech_options()
            elif self.state.answer.core_features:
                self.request_tech_recommendation()
        elif step == WizardStep.GENERATE:
            self.request_final_spec()

    # Requests

    def request_project_guidance(self) -> Optional[Future]:
        project_type = self.state.answer.project_type
        if not project_type:
            return None

        def apply(text: str) -> None:
            self.guidance = text

        return self._submit(
            RequestPurpose.GUIDANCE,
            lambda: self.assistant.project_type_guidance(project_type),
            apply,
        )

    def request_feature_suggestions(self) -> Future:
        answer = self.state.answer

        def apply(features: list[str]) -> None:
            self.suggestions = features

        return self._submit(
            RequestPurpose.SUGGESTIONS,
            lambda: self.assistant.suggest_features(
                answer.project_type, answer.project_name, answer.description
            ),
            apply,
        )

    def request_description_enhancement(self) -> Optional[Future]:
        answer = self.state.answer
        if not answer.description.strip():
            return None

        def apply(text: str) -> None:
            self.enhanced_description = text

        return self._submit(
            RequestPurpose.ENHANCEMENT,
            lambda: self.assistant.enhance_description(
                answer.description, answer.project_type, answer.project_name
            ),
            apply,
        )

    def request_tech_options(self) -> Future:
        """Load a catalog for the current project type, then recommend a stack."""
        project_type = self.state.answer.project_type

        def apply(catalog: TechOptionCatalog) -> None:
            self.state.catalog = catalog
            self._catalog_project_type = project_type
            if self.state.answer.core_features:
                self.request_tech_recommendation()

        return self._submit(
            RequestPurpose.TECH_OPTIONS,
            lambda: self.assistant.generate_tech_options(project_type),
            apply,
        )

    def request_tech_recommendation(self) -> Future:
        """
        Pick a recommended stack locally and ask the model to explain it.

        The recommended stack is auto-selected only while nothing is chosen.
        """
        with self.lock:
            answer = self.state.answer
            if self.catalog is not None:
                self.recommended_stack = recommend_stack(
                    answer.project_type, answer.core_features, self.catalog
                )
                if answer.tech_stack.is_empty():
                    self.state.update("tech_stack", self.recommended_stack)

        def apply(text: str) -> None:
            self.recommendation = text

        return self._submit(
            RequestPurpose.RECOMMENDATION,
            lambda: self.assistant.recommend_tech_stack(
                answer.project_type, answer.project_name, answer.description, answer.core_features
            ),
            apply,
        )

    def request_final_spec(self) -> Future:
        answer = self.state.answer

        def apply(text: str) -> None:
            self.final_spec = text

        return self._submit(
            RequestPurpose.FINAL_SPEC,
            lambda: self.assistant.generate_final_spec(answer),
            apply,
        )

    # User actions

    def accept_enhanced_description(self) -> bool:
        """Replace the description with the enhanced one, if there is one."""
        with self.lock:
            if not self.enhanced_description:
                return False
            self.state.update("description", self.enhanced_description)
            self.enhanced_description = ""
            return True

    def apply_recommended_stack(self) -> bool:
        with self.lock:
            if self.recommended_stack is None:
                return False
            self.state.update("tech_stack", self.recommended_stack)
            return True

    def close(self) -> None:
        if self._owns_executor:
            self.executor.shutdown(wait=True)

    def __enter__(self) -> "WizardSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
