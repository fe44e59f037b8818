"""Core debate engine: session lifecycle, argument submission and completion."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from rostrum.evaluators.base import BaseEvaluator
from rostrum.formats import DebateFormat, format_registry
from rostrum.judges.base import BaseJudge, DebateAnalysis, neutral_analysis
from rostrum.storage.base import SessionStore
from .exceptions import (
    DebateStateError,
    EvaluatorUnavailable,
    NotFoundError,
    ValidationError,
)
from .models import (
    Argument,
    ArgumentFeedback,
    CompletionOutcome,
    DebateResult,
    DebateSession,
    DebateSetup,
    SubmissionOutcome,
    new_id,
    parse_enum,
)
from .timer import PhaseTimer
from .types import (
    DebateFormatName,
    DebatePhase,
    DebateStatus,
    Difficulty,
    ErrorCategory,
    Position,
    Speaker,
)

logger = logging.getLogger(__name__)


class DebateEngine:
    """Drives debates through setup -> active phases -> completed.

    All persistent state lives in the injected SessionStore; the engine
    itself only keeps the running phase timers and per-debate completion
    locks.
    """

    def __init__(
        self,
        store: SessionStore,
        evaluator: BaseEvaluator,
        judge: BaseJudge,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.evaluator = evaluator
        self.judge = judge
        self.clock = clock
        self._timers: dict[str, PhaseTimer] = {}
        self._completion_locks: dict[str, asyncio.Lock] = {}

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def create_debate(self, setup: DebateSetup) -> DebateSession:
        """Validate the setup and open the debate in its first phase."""
        topic = (setup.topic or "").strip()
        if not topic:
            raise ValidationError("Topic must not be empty")

        debate_format = parse_enum(DebateFormatName, setup.format, "format")
        user_position = parse_enum(Position, setup.user_position, "user_position")
        ai_difficulty = parse_enum(Difficulty, setup.ai_difficulty, "ai_difficulty")

        first_phase = format_registry.get_format(debate_format).phase_sequence[0]
        session = DebateSession(
            id=new_id(),
            topic=topic,
            format=debate_format,
            user_position=user_position,
            ai_difficulty=ai_difficulty,
            status=DebateStatus.SETUP,
            current_phase=first_phase,
            time_remaining_seconds=format_registry.get_phase_duration(debate_format, first_phase),
            real_time_feedback=setup.real_time_feedback,
            created_at=self.clock(),
        )
        session = replace(session, status=DebateStatus.ACTIVE)
        self.store.put(session)

        logger.info(
            f"Created debate {session.id}: '{topic}' ({debate_format.value}, "
            f"user {user_position.value}, AI {ai_difficulty.value})"
        )
        return session

    def get_debate(self, debate_id: str) -> DebateSession:
        session = self.store.get(debate_id)
        if session is None:
            raise NotFoundError(f"Debate not found: {debate_id}")
        return session

    def update_debate(
        self,
        debate_id: str,
        *,
        time_remaining_seconds: int | None = None,
        real_time_feedback: bool | None = None,
        current_phase: DebatePhase | str | None = None,
    ) -> DebateSession:
        """Patch mutable session fields. Phases may only move forward."""
        session = self._require_active(debate_id)

        if time_remaining_seconds is not None and time_remaining_seconds < 0:
            raise ValidationError("time_remaining_seconds must be non-negative")

        updated = session
        if current_phase is not None:
            target = parse_enum(DebatePhase, current_phase, "current_phase")
            if target is not session.current_phase:
                debate_format = self._format_of(session)
                sequence = debate_format.phase_sequence
                if target not in sequence:
                    raise ValidationError(
                        f"Phase {target.value} is not part of the {session.format.value} format"
                    )
                if sequence.index(target) < sequence.index(session.current_phase):
                    raise ValidationError(
                        f"Cannot move back from {session.current_phase.value} to {target.value}"
                    )
                self._discard_timer(debate_id)
                updated = replace(
                    updated,
                    current_phase=target,
                    time_remaining_seconds=debate_format.get_phase_duration(target),
                )
                logger.info(f"Debate {debate_id} moved to phase {target.value}")

        if time_remaining_seconds is not None:
            updated = replace(updated, time_remaining_seconds=time_remaining_seconds)
        if real_time_feedback is not None:
            updated = replace(updated, real_time_feedback=real_time_feedback)

        self.store.put(updated)
        return updated

    def advance_phase(self, debate_id: str) -> DebateSession:
        """Move to the next phase of the format; the last phase must be completed instead."""
        session = self._require_active(debate_id)
        debate_format = self._format_of(session)

        next_phase = debate_format.next_phase(session.current_phase)
        if next_phase is None:
            raise DebateStateError(
                f"{session.current_phase.value} is the final phase of a "
                f"{session.format.value} debate; complete the debate instead"
            )

        self._discard_timer(debate_id)
        updated = replace(
            session,
            current_phase=next_phase,
            time_remaining_seconds=debate_format.get_phase_duration(next_phase),
        )
        self.store.put(updated)
        logger.info(
            f"Debate {debate_id} advanced {session.current_phase.value} -> {next_phase.value}"
        )
        return updated

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    def list_arguments(self, debate_id: str) -> list[Argument]:
        self.get_debate(debate_id)
        return self.store.get_arguments(debate_id)

    async def submit_argument(self, debate_id: str, content: str) -> SubmissionOutcome:
        """Score the user's argument, then generate and record the AI's reply.

        Scoring and generation run strictly one after the other. An
        unavailable evaluator degrades the outcome (no scores and/or no AI
        reply, plus an error category); any other evaluator failure
        propagates once the user's argument has been recorded.
        """
        session = self._require_active(debate_id)
        text = (content or "").strip()
        if not text:
            raise ValidationError("Argument content must not be empty")

        phase = session.current_phase

        try:
            analysis = await self.evaluator.score_argument(
                text, session.topic, session.user_position, session.format
            )
        except EvaluatorUnavailable as e:
            user_argument = self._record_user_argument(session, text, phase)
            logger.warning(f"Scoring unavailable for debate {debate_id} ({e.category.value}): {e}")
            return SubmissionOutcome(user_argument=user_argument, error=e.category)
        except Exception:
            self._record_user_argument(session, text, phase)
            logger.exception(f"Scoring failed for debate {debate_id}")
            raise

        user_argument = self._record_user_argument(
            session,
            text,
            phase,
            strength_score=analysis.strength_score,
            logic_score=analysis.logic_score,
            persuasiveness_score=analysis.persuasiveness_score,
            feedback=analysis.feedback,
        )

        try:
            counter = await self.evaluator.generate_counter_argument(
                session.topic,
                session.ai_position,
                text,
                session.format,
                session.ai_difficulty,
                phase,
            )
        except EvaluatorUnavailable as e:
            logger.warning(
                f"Counter-argument unavailable for debate {debate_id} ({e.category.value}): {e}"
            )
            return SubmissionOutcome(user_argument=user_argument, error=e.category)

        ai_argument = Argument(
            id=new_id(),
            debate_id=debate_id,
            speaker=Speaker.AI,
            content=counter.content,
            phase=phase,
            created_at=self.clock(),
        )
        self.store.append_argument(ai_argument)

        return SubmissionOutcome(
            user_argument=user_argument,
            ai_argument=ai_argument,
            ai_strategy=counter.strategy,
        )

    def _record_user_argument(
        self,
        session: DebateSession,
        text: str,
        phase: DebatePhase,
        strength_score: int | None = None,
        logic_score: int | None = None,
        persuasiveness_score: int | None = None,
        feedback: ArgumentFeedback | None = None,
    ) -> Argument:
        argument = Argument(
            id=new_id(),
            debate_id=session.id,
            speaker=Speaker.USER,
            content=text,
            phase=phase,
            strength_score=strength_score,
            logic_score=logic_score,
            persuasiveness_score=persuasiveness_score,
            feedback=feedback,
            created_at=self.clock(),
        )
        self.store.append_argument(argument)
        return argument

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    async def complete_debate(self, debate_id: str) -> CompletionOutcome:
        """Judge the transcript, store the result, then mark the debate completed.

        Repeated calls return the stored result. Judge failures produce the
        neutral result so completion always succeeds.
        """
        lock = self._completion_locks.setdefault(debate_id, asyncio.Lock())
        try:
            return await self._complete_locked(debate_id, lock)
        finally:
            # Once a result exists (or the debate is unknown) later calls never
            # need the lock; current waiters keep their own reference.
            if self.store.get(debate_id) is None or self.store.get_result(debate_id) is not None:
                self._completion_locks.pop(debate_id, None)

    async def _complete_locked(self, debate_id: str, lock: asyncio.Lock) -> CompletionOutcome:
        async with lock:
            session = self.get_debate(debate_id)
            existing = self.store.get_result(debate_id)
            if existing is not None:
                if not session.is_completed:
                    self._mark_completed(session)
                return CompletionOutcome(result=existing)

            self._discard_timer(debate_id)

            arguments = self.store.get_arguments(debate_id)
            user_contents = [arg.content for arg in arguments if arg.speaker is Speaker.USER]
            ai_contents = [arg.content for arg in arguments if arg.speaker is Speaker.AI]

            error: ErrorCategory | None = None
            try:
                analysis = await self.judge.aggregate(
                    session.topic,
                    session.user_position,
                    user_contents,
                    ai_contents,
                    session.format,
                )
            except EvaluatorUnavailable as e:
                logger.error(f"Debate analysis unavailable for {debate_id}: {e}")
                error = e.category
                analysis = neutral_analysis()
            except Exception as e:
                logger.error(f"Debate analysis failed for {debate_id}: {type(e).__name__}: {e}")
                error = ErrorCategory.GENERIC_UNAVAILABLE
                analysis = neutral_analysis()

            result = self._build_result(debate_id, analysis)
            # Result first: anyone who sees status=completed can read it.
            self.store.put_result(result)
            self._mark_completed(self.get_debate(debate_id))

            logger.info(
                f"Debate {debate_id} completed: winner={result.winner.value}, "
                f"overall={result.overall_score}"
            )
            return CompletionOutcome(result=result, error=error)

    def get_result(self, debate_id: str) -> DebateResult:
        self.get_debate(debate_id)
        result = self.store.get_result(debate_id)
        if result is None:
            raise NotFoundError(f"Debate result not found: {debate_id}")
        return result

    def _build_result(self, debate_id: str, analysis: DebateAnalysis) -> DebateResult:
        return DebateResult(
            id=new_id(),
            debate_id=debate_id,
            overall_score=analysis.overall_score,
            strength_score=analysis.strength_score,
            logic_score=analysis.logic_score,
            persuasiveness_score=analysis.persuasiveness_score,
            response_score=analysis.response_score,
            winner=analysis.winner,
            strengths=list(analysis.strengths),
            improvements=list(analysis.improvements),
            created_at=self.clock(),
        )

    def _mark_completed(self, session: DebateSession) -> None:
        # A timer started while the judge was running must not outlive the debate.
        self._discard_timer(session.id)
        self.store.put(
            replace(session, status=DebateStatus.COMPLETED, completed_at=self.clock())
        )

    # ------------------------------------------------------------------
    # Phase timers
    # ------------------------------------------------------------------

    def get_timer(self, debate_id: str) -> PhaseTimer | None:
        return self._timers.get(debate_id)

    def start_timer(self, debate_id: str) -> PhaseTimer:
        """Start (or resume) the countdown for the current phase.

        Must be called from a running event loop. Each tick persists the
        remaining time; expiry advances the phase, or completes the debate
        from its final phase.
        """
        session = self._require_active(debate_id)
        timer = self._timers.get(debate_id)
        if timer is None:
            phase_seconds = self._format_of(session).get_phase_duration(session.current_phase)

            async def on_tick(seconds_remaining: int) -> None:
                await self._on_timer_tick(debate_id, seconds_remaining)

            async def on_complete() -> None:
                await self._on_timer_complete(debate_id)

            timer = PhaseTimer(phase_seconds, on_tick=on_tick, on_complete=on_complete)
            timer.seconds_remaining = min(session.time_remaining_seconds, phase_seconds)
            self._timers[debate_id] = timer

        timer.start()
        logger.debug(f"Timer for debate {debate_id} running at {timer.formatted_time}")
        return timer

    def pause_timer(self, debate_id: str) -> DebateSession:
        session = self._require_active(debate_id)
        timer = self._timers.get(debate_id)
        if timer is not None:
            timer.pause()
        return session

    def stop_timer(self, debate_id: str) -> DebateSession:
        """Stop the countdown and restore the phase's full duration."""
        session = self._require_active(debate_id)
        timer = self._timers.get(debate_id)
        if timer is not None:
            timer.stop()
        updated = replace(
            session,
            time_remaining_seconds=self._format_of(session).get_phase_duration(
                session.current_phase
            ),
        )
        self.store.put(updated)
        return updated

    async def _on_timer_tick(self, debate_id: str, seconds_remaining: int) -> None:
        session = self.store.get(debate_id)
        if session is None or session.status is not DebateStatus.ACTIVE:
            return
        self.store.put(replace(session, time_remaining_seconds=seconds_remaining))

    async def _on_timer_complete(self, debate_id: str) -> None:
        session = self.store.get(debate_id)
        if session is None or session.status is not DebateStatus.ACTIVE:
            return
        if self._format_of(session).is_final_phase(session.current_phase):
            logger.info(f"Final phase timer expired for debate {debate_id}; completing")
            await self.complete_debate(debate_id)
        else:
            logger.info(f"Phase timer expired for debate {debate_id}; advancing")
            self.advance_phase(debate_id)

    def cancel_timers(self) -> None:
        """Pause every running countdown (used on shutdown)."""
        for debate_id in list(self._timers):
            self._discard_timer(debate_id)

    def _discard_timer(self, debate_id: str) -> None:
        timer = self._timers.pop(debate_id, None)
        if timer is not None:
            timer.pause()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_active(self, debate_id: str) -> DebateSession:
        session = self.get_debate(debate_id)
        if session.status is not DebateStatus.ACTIVE:
            raise DebateStateError(
                f"Debate {debate_id} is {session.status.value}, not active"
            )
        return session

    def _format_of(self, session: DebateSession) -> DebateFormat:
        return format_registry.get_format(session.format)
