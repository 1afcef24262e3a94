# Area: Game
"""
dond_game._game.controller — Game controller
============================================

Orchestrates round progression, elimination quotas and the phase state
machine. Consumes the Board and the OfferEngine and emits notifications
to subscribed listeners.

Intents never raise for caller mistakes: an intent that is illegal for
the current phase or target is rejected, state is left unchanged, and an
IntentRejected notification is emitted alongside the returned result.
"""

from __future__ import annotations
import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, List, Optional

from .capability import DebugCapability
from .enums import GameEvent, GameIntent, GamePhase
from .notifications import (
    ContainerEliminated,
    ContainerSelected,
    DealAccepted,
    IntentRejected,
    Notification,
    OfferMade,
    RoundAdvanced,
    SessionConcluded,
    SessionOutcome,
    SessionStarted,
    SwitchOffered,
)
from .quota import FINAL_PAIR, FIRST_ROUND_QUOTA, quota_for
from .session import GameSession
from .statistics import build_export, build_statistics, help_text, phase_description
from .._banker.offer_engine import (
    DEFAULT_AGGRESSIVENESS,
    OfferEngine,
    clamp_aggressiveness,
    resolve_difficulty,
)
from .._board.board import Board
from .._board.values import ValueSet
from ..errors import CapabilityError, ConfigurationError, IllegalIntentError
from ..types import GameExport, GameStatistics

logger = logging.getLogger("dond_game.controller")

Listener = Callable[[Notification], None]


@dataclass(frozen=True)
class IntentResult:
    """Outcome of one inbound intent."""
    intent: GameIntent
    accepted: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted


class GameController:
    """
    Round/elimination controller for one session at a time.

    A session starts on construction; start_session() discards it and
    begins a new one.

    Args:
        value_set: Denomination table; defaults to ValueSet.standard()
        shuffle_rng: Random source for the session-start shuffle
        jitter_rng: Random source for the offer jitter
        aggressiveness: Banker difficulty knob in [0, 1]
        debug_capability: Token that unlocks debug operations, if any

    Raises:
        ConfigurationError: If the denomination table does not fit the board
    """

    def __init__(
        self,
        value_set: Optional[ValueSet] = None,
        shuffle_rng: Optional[random.Random] = None,
        jitter_rng: Optional[random.Random] = None,
        aggressiveness: float = DEFAULT_AGGRESSIVENESS,
        debug_capability: Optional[DebugCapability] = None,
    ):
        self.value_set = value_set or ValueSet.standard()
        self.shuffle_rng = shuffle_rng or random.Random()
        self.jitter_rng = jitter_rng or random.Random()
        self.aggressiveness = clamp_aggressiveness(aggressiveness)
        self._debug_capability = debug_capability
        self._listeners: List[Listener] = []
        self._outbox: Deque[Notification] = deque()
        self._delivering = False
        self._dispatching = False
        self._sessions_started = 0

        self.board: Board
        self.engine: OfferEngine
        self.session: GameSession
        self.start_session()

    # ── Observers ───────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── Inbound intents ─────────────────────────────────────────

    def start_session(self) -> None:
        """Discard all session state and start a new session."""
        try:
            board = Board(self.value_set, self.shuffle_rng)
        except ConfigurationError as e:
            logger.error(e.format_error_log())
            raise

        self.board = board
        self.engine = OfferEngine(self.jitter_rng, self.aggressiveness)
        self._sessions_started += 1
        self.session = GameSession(session_number=self._sessions_started)
        self._outbox.clear()
        self.session.record("session_started")
        logger.info(f"Session {self._sessions_started} started")
        self._emit(SessionStarted(
            session_number=self._sessions_started,
            container_count=board.container_count,
        ))
        self._flush()

    def select_container(self, container_id: int) -> IntentResult:
        return self._dispatch(GameIntent.SELECT, self._apply_select, container_id)

    def eliminate_container(self, container_id: int) -> IntentResult:
        return self._dispatch(GameIntent.ELIMINATE, self._apply_eliminate, container_id)

    def accept_offer(self) -> IntentResult:
        return self._dispatch(GameIntent.ACCEPT, self._apply_accept)

    def reject_offer(self) -> IntentResult:
        return self._dispatch(GameIntent.REJECT, self._apply_reject)

    def choose_switch(self, switch: bool) -> IntentResult:
        return self._dispatch(GameIntent.CHOOSE_SWITCH, self._apply_switch, switch)

    def set_difficulty(self, name: str) -> float:
        """Set the banker's aggressiveness from a preset name."""
        try:
            level = resolve_difficulty(name)
        except ValueError as e:
            raise ConfigurationError(str(e), details={"difficulty": name}) from e
        self.aggressiveness = level
        self.engine.set_aggressiveness(level)
        self.session.record("difficulty_changed", difficulty=name, aggressiveness=level)
        logger.info(f"Difficulty set to {name} (aggressiveness={level})")
        return level

    # ── Queries ─────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        return self.session.phase

    @property
    def round(self) -> int:
        return self.session.round_number

    @property
    def quota(self) -> int:
        return self.session.elimination_quota

    @property
    def eliminated_this_round(self) -> int:
        return self.session.eliminated_this_round

    @property
    def cases_left_this_round(self) -> int:
        return self.session.cases_left_this_round

    @property
    def held_container_id(self) -> Optional[int]:
        return self.session.held_container_id

    @property
    def outcome(self) -> Optional[SessionOutcome]:
        return self.session.outcome

    @property
    def current_offer(self):
        return self.session.current_offer

    def remaining_values(self) -> List[int]:
        return self.board.remaining_values()

    def eliminated_values(self) -> List[int]:
        return self.board.eliminated_values()

    def available_containers(self) -> List[int]:
        return self.board.available_for_elimination()

    def offer_history(self) -> List[int]:
        return list(self.session.offer_history)

    def phase_description(self) -> str:
        return phase_description(self.session, self.board)

    def help_text(self) -> str:
        return help_text(self.session)

    def statistics(self) -> GameStatistics:
        return build_statistics(self.session, self.board, self.engine)

    def export(self) -> GameExport:
        return build_export(self.session, self.board, self.engine)

    # ── Debug operations ────────────────────────────────────────

    def check_capability(self, capability: Any) -> None:
        if self._debug_capability is None or capability is not self._debug_capability:
            raise CapabilityError("Debug operations require the host's capability token")

    def debug_end_round(self, capability: DebugCapability) -> IntentResult:
        """Close the current round early and run the end-of-round evaluation."""
        self.check_capability(capability)
        return self._dispatch(GameIntent.ELIMINATE, self._force_end_round)

    def debug_skip_to_end(self, capability: DebugCapability) -> IntentResult:
        """Open every non-held container but one, then evaluate the round."""
        self.check_capability(capability)
        return self._dispatch(GameIntent.ELIMINATE, self._skip_to_final_pair)

    # ── Dispatch ────────────────────────────────────────────────

    def _dispatch(self, intent: GameIntent, handler: Callable[..., None], *args: Any) -> IntentResult:
        if self._dispatching:
            return self._reject(intent, IllegalIntentError(
                intent.value, "another intent is still being processed",
                phase=self.phase.value,
            ))
        error: Optional[IllegalIntentError] = None
        self._dispatching = True
        try:
            self.session.machine.require(intent)
            handler(*args)
        except IllegalIntentError as e:
            error = e
        finally:
            self._dispatching = False
        if error is not None:
            return self._reject(intent, error)
        self._flush()
        return IntentResult(intent=intent, accepted=True)

    def _reject(self, intent: GameIntent, error: IllegalIntentError) -> IntentResult:
        logger.warning(f"Rejected {intent.value} in {self.phase.value}: {error.reason}")
        self._emit(IntentRejected(
            intent=intent.value,
            phase=self.phase.value,
            reason=error.reason,
            container_id=error.container_id,
        ))
        self._flush()
        return IntentResult(intent=intent, accepted=False, reason=error.reason)

    def _emit(self, notification: Notification) -> None:
        self._outbox.append(notification)

    def _flush(self) -> None:
        """Deliver queued notifications in order; listeners may dispatch intents."""
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._outbox:
                notification = self._outbox.popleft()
                for listener in list(self._listeners):
                    try:
                        listener(notification)
                    except Exception:
                        logger.exception(f"Listener failed on {notification.kind}")
        finally:
            self._delivering = False

    # ── Handlers ────────────────────────────────────────────────

    def _apply_select(self, container_id: int) -> None:
        self.board.select_held(container_id)
        session = self.session
        session.machine.transition(GameEvent.CONTAINER_SELECTED)
        session.held_container_id = container_id
        session.original_container_id = container_id
        session.elimination_quota = FIRST_ROUND_QUOTA
        session.eliminated_this_round = 0
        session.record("case_selected", case_number=container_id)
        logger.info(f"Container {container_id} selected; round 1 quota {FIRST_ROUND_QUOTA}")
        self._emit(ContainerSelected(container_id=container_id, quota=FIRST_ROUND_QUOTA))

    def _apply_eliminate(self, container_id: int) -> None:
        value = self.board.eliminate(container_id)
        session = self.session
        session.eliminated_this_round += 1
        session.record("case_eliminated", case_number=container_id, value=value)
        logger.info(
            f"Container {container_id} eliminated ({session.eliminated_this_round}/"
            f"{session.elimination_quota})"
        )
        self._emit(ContainerEliminated(
            container_id=container_id,
            value=value,
            round_number=session.round_number,
            eliminated_this_round=session.eliminated_this_round,
            quota=session.elimination_quota,
        ))
        if session.eliminated_this_round >= session.elimination_quota:
            self._end_round()

    def _end_round(self) -> None:
        if self.board.remaining_count() <= FINAL_PAIR:
            self._offer_switch()
            return

        session = self.session
        offer = self.engine.make_offer(self.board.available_values(), session.round_number)
        session.machine.transition(GameEvent.ROUND_COMPLETE)
        session.current_offer = offer
        session.offer_history.append(offer.amount)
        session.record("banker_offer", offer=offer.amount, tone=offer.tone.value)
        self._emit(OfferMade(
            amount=offer.amount,
            round_number=offer.round_number,
            tone=offer.tone,
            message=offer.message,
            offer_number=offer.offer_number,
        ))

    def _offer_switch(self) -> None:
        session = self.session
        session.machine.transition(GameEvent.FINAL_PAIR_REACHED)
        others = self.board.available_for_elimination()
        held = self.board.held_container_id
        if not others:
            self._conclude(switched=False, other_id=None)
            return
        session.record("switch_offered", other_case=others[0])
        logger.info(f"Final pair reached: held {held}, other {others[0]}")
        self._emit(SwitchOffered(other_container_id=others[0], held_container_id=held))

    def _apply_accept(self) -> None:
        session = self.session
        offer = session.current_offer
        session.machine.transition(GameEvent.OFFER_ACCEPTED)
        held_value = self.board.held_value()
        session.outcome = SessionOutcome(
            final_amount=offer.amount,
            held_value=held_value,
            deal_taken=True,
            switched=False,
            original_container_id=session.original_container_id,
            final_container_id=session.held_container_id,
        )
        session.record(
            "deal_accepted",
            banker_amount=offer.amount,
            briefcase_amount=held_value,
            difference=held_value - offer.amount,
        )
        logger.info(f"Deal accepted at {offer.amount}; held container had {held_value}")
        self._emit(DealAccepted(
            amount=offer.amount,
            held_value=held_value,
            held_container_id=session.held_container_id,
        ))

    def _apply_reject(self) -> None:
        session = self.session
        session.machine.transition(GameEvent.OFFER_REJECTED)
        session.round_number += 1
        session.elimination_quota = quota_for(len(self.board.available_for_elimination()))
        session.eliminated_this_round = 0
        session.current_offer = None
        session.record("deal_rejected", quota=session.elimination_quota)
        logger.info(f"Offer rejected; round {session.round_number} quota {session.elimination_quota}")
        self._emit(RoundAdvanced(
            round_number=session.round_number,
            quota=session.elimination_quota,
        ))

    def _apply_switch(self, switch: bool) -> None:
        if not isinstance(switch, bool):
            raise IllegalIntentError(
                GameIntent.CHOOSE_SWITCH.value,
                f"expected a bool, got {type(switch).__name__}",
                phase=self.phase.value,
            )
        held = self.board.held_container_id
        other = self.board.available_for_elimination()[0]
        left_behind = other
        if switch:
            self.board.switch_held(other)
            left_behind = held
        self._conclude(switched=switch, other_id=left_behind)

    def _conclude(self, switched: bool, other_id: Optional[int]) -> None:
        session = self.session
        session.machine.transition(GameEvent.SWITCH_DECIDED)
        final_id = self.board.held_container_id
        final_value = self.board.held_value()
        other = self.board.container(other_id) if other_id is not None else None
        other_value = other.value if other else None
        session.held_container_id = final_id
        session.outcome = SessionOutcome(
            final_amount=final_value,
            held_value=final_value,
            deal_taken=False,
            switched=switched,
            original_container_id=session.original_container_id,
            final_container_id=final_id,
            other_value=other_value,
        )
        session.record(
            "game_ended_with_switch",
            switched=switched,
            final_amount=final_value,
            other_value=other_value,
        )
        logger.info(f"Session concluded: container {final_id} worth {final_value} (switched={switched})")
        self._emit(SessionConcluded(
            final_value=final_value,
            switched=switched,
            final_container_id=final_id,
            other_container_id=other_id,
            other_value=other_value,
        ))

    def _force_end_round(self) -> None:
        self.session.record("forced_offer")
        self._end_round()

    def _skip_to_final_pair(self) -> None:
        session = self.session
        session.eliminated_this_round = session.elimination_quota
        for container_id in self.board.available_for_elimination()[:-1]:
            value = self.board.eliminate(container_id)
            self._emit(ContainerEliminated(
                container_id=container_id,
                value=value,
                round_number=session.round_number,
                eliminated_this_round=session.eliminated_this_round,
                quota=session.elimination_quota,
            ))
        session.record("skipped_to_end")
        self._end_round()
