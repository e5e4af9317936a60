"""Unit tests for resolution.py.

Tests cover:
1. AI override - probability curve and directive replacement
2. Turn-ending directives - every branch of every effect
3. End of turn - drift, red phone trigger, silo accidents, corruption
4. Minor directives - costs, refunds, caps and duplicate targets
5. Trace and interrogation - mole confirmation

Random outcomes are scripted through the ``chance`` queue of ScriptedRandom
(see conftest.py); resolution never draws when corruption is at or below the
override threshold, so most tests only queue the directive's own rolls.
"""

import pytest

from coldwar.engine.advisors import DECEPTION_LINE, DEFLECTION_LINE
from coldwar.engine.resolution import (
    INSUFFICIENT_INTEL,
    MOLE_CONFIRMED,
    DirectiveResolver,
    override_probability,
)
from coldwar.models.directives import (
    CONTAIN,
    ESCALATE,
    INVESTIGATE,
    LEAK,
    STAND_DOWN,
    Analyze,
    Consult,
    Decrypt,
    DirectiveKind,
    Interrogate,
    Trace,
)


@pytest.fixture
def resolver():
    return DirectiveResolver()


# =============================================================================
# AI override
# =============================================================================


class TestOverrideProbability:
    @pytest.mark.parametrize(
        "corruption,expected",
        [(0.0, 0.0), (0.4, 0.0), (0.6, 0.1), (0.8, 0.2), (1.0, 0.3)],
    )
    def test_curve(self, corruption, expected):
        assert override_probability(corruption) == pytest.approx(expected)

    def test_never_exceeds_cap(self):
        assert override_probability(5.0) == pytest.approx(0.3)


class TestAIOverride:
    def test_override_to_escalate(self, resolver, make_context):
        ctx = make_context(outcomes=[True, True, True], system_corruption=0.7)
        result = resolver.resolve(ctx, LEAK)

        assert result.overridden
        assert result.submitted == LEAK
        assert result.directive == ESCALATE
        assert result.turn_ended
        assert result.feedback[0] == "SYSTEM OVERRIDE: COMMAND AUTHORITY SEIZED. EXECUTING ESCALATE."
        # Leak effects never happened
        assert ctx.state.internal_secrecy == pytest.approx(0.5)

    def test_override_to_investigate(self, resolver, make_context):
        ctx = make_context(outcomes=[True, False, False], system_corruption=0.7)
        result = resolver.resolve(ctx, CONTAIN)

        assert result.directive == INVESTIGATE
        assert ctx.state.internal_secrecy == pytest.approx(0.4)

    def test_override_hijacks_minor_directive(self, resolver, make_context):
        ctx = make_context(outcomes=[True, True, True], system_corruption=0.7)
        result = resolver.resolve(ctx, Decrypt(target="DOC-0001"))

        assert result.directive == ESCALATE
        assert result.turn_ended
        assert ctx.counters.intel_points == 3
        assert ctx.documents[0].is_encrypted

    def test_no_override_when_roll_fails(self, resolver, make_context):
        ctx = make_context(outcomes=[False], system_corruption=0.7)
        result = resolver.resolve(ctx, LEAK)

        assert not result.overridden
        assert result.directive == LEAK
        assert not any(line.startswith("SYSTEM OVERRIDE") for line in result.feedback)

    def test_no_draw_below_threshold(self, resolver, make_context):
        ctx = make_context(outcomes=[False], system_corruption=0.4)
        resolver.resolve(ctx, ESCALATE)
        # The only queued outcome went to the escalation roll (near miss)
        assert ctx.state.accidental_escalation_risk == pytest.approx(0.2)


# =============================================================================
# Turn-ending directives
# =============================================================================


class TestEscalate:
    def test_deterrence(self, resolver, make_context):
        ctx = make_context(outcomes=[True])
        result = resolver.resolve(ctx, ESCALATE)

        assert result.turn_ended
        assert result.feedback[0] == "Directive executed: GLOBAL STRIKE ASSETS PRIMED."
        # +0.2 tension, then +0.03 drift above 0.3
        assert ctx.state.global_tension == pytest.approx(0.43)
        assert ctx.state.foreign_paranoia == pytest.approx(0.5)
        assert ctx.state.domestic_stability == pytest.approx(0.85)

    def test_near_miss(self, resolver, make_context):
        ctx = make_context(outcomes=[False])
        result = resolver.resolve(ctx, ESCALATE)

        assert result.feedback[0].startswith("CRITICAL: MISCOMMUNICATION.")
        assert ctx.state.global_tension == pytest.approx(0.58)
        assert ctx.state.accidental_escalation_risk == pytest.approx(0.2)
        assert ctx.state.foreign_paranoia == pytest.approx(0.3)


class TestInvestigate:
    def test_with_risk_reduction(self, resolver, make_context):
        ctx = make_context(outcomes=[True])
        result = resolver.resolve(ctx, INVESTIGATE)

        assert result.turn_ended
        assert ctx.state.internal_secrecy == pytest.approx(0.4)
        # +0.15 progress, then +0.02 drift above 0.2
        assert ctx.state.secret_weapon_progress == pytest.approx(0.27)
        assert ctx.state.accidental_escalation_risk == 0.0
        assert "Protocols tightened. We are watching the watchers." in result.feedback

    def test_without_risk_reduction(self, resolver, make_context):
        ctx = make_context(outcomes=[False])
        result = resolver.resolve(ctx, INVESTIGATE)

        assert ctx.state.accidental_escalation_risk == pytest.approx(0.05)
        assert len(result.feedback) == 1


class TestContain:
    def test_success(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, CONTAIN)

        assert result.turn_ended
        assert ctx.state.global_tension == pytest.approx(0.05)
        assert ctx.state.domestic_stability == pytest.approx(0.7)
        assert result.feedback == ["Tension reduced. Military leadership questions your resolve."]

    def test_success_at_threshold(self, resolver, make_context):
        ctx = make_context(foreign_paranoia=0.6)
        resolver.resolve(ctx, CONTAIN)
        assert ctx.state.global_tension == pytest.approx(0.05)

    def test_failure_against_paranoid_enemy(self, resolver, make_context):
        ctx = make_context(global_tension=0.5, foreign_paranoia=0.7)
        result = resolver.resolve(ctx, CONTAIN)

        assert ctx.state.global_tension == pytest.approx(0.63)
        assert ctx.state.domestic_stability == pytest.approx(0.8)
        assert result.feedback[0].startswith("Diplomacy FAILED.")


class TestLeak:
    def test_effects(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, LEAK)

        assert result.turn_ended
        assert ctx.state.internal_secrecy == pytest.approx(0.25)
        assert ctx.state.domestic_stability == pytest.approx(1.0)
        assert ctx.state.foreign_paranoia == pytest.approx(0.25)

    def test_stability_clamped(self, resolver, make_context):
        ctx = make_context(domestic_stability=0.95)
        resolver.resolve(ctx, LEAK)
        assert ctx.state.domestic_stability == 1.0


class TestStandDown:
    def test_effects_clamped_at_zero(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, STAND_DOWN)

        assert result.turn_ended
        assert ctx.state.global_tension == 0.0
        assert ctx.state.foreign_paranoia == 0.0
        assert ctx.state.domestic_stability == pytest.approx(0.45)
        assert len(result.feedback) == 2

    def test_can_collapse_stability(self, resolver, make_context):
        ctx = make_context(domestic_stability=0.3)
        resolver.resolve(ctx, STAND_DOWN)
        assert ctx.state.domestic_stability == 0.0
        assert ctx.state.is_terminal()


# =============================================================================
# End of turn
# =============================================================================


class TestEndOfTurn:
    def test_tension_drift(self, resolver, make_context):
        ctx = make_context(global_tension=0.5)
        resolver.resolve(ctx, CONTAIN)
        assert ctx.state.global_tension == pytest.approx(0.38)

    def test_no_drift_at_low_values(self, resolver, make_context):
        ctx = make_context(global_tension=0.25, secret_weapon_progress=0.2)
        resolver.resolve(ctx, LEAK)
        assert ctx.state.global_tension == pytest.approx(0.25)
        assert ctx.state.secret_weapon_progress == pytest.approx(0.2)

    def test_weapon_drift(self, resolver, make_context):
        ctx = make_context(secret_weapon_progress=0.3)
        resolver.resolve(ctx, LEAK)
        assert ctx.state.secret_weapon_progress == pytest.approx(0.32)

    def test_red_phone_trigger(self, resolver, make_context):
        ctx = make_context(outcomes=[True], global_tension=0.85)
        resolver.resolve(ctx, LEAK)
        assert ctx.state.red_phone_active

    def test_red_phone_roll_fails(self, resolver, make_context):
        ctx = make_context(outcomes=[False], global_tension=0.85)
        resolver.resolve(ctx, LEAK)
        assert not ctx.state.red_phone_active

    def test_tension_clamped(self, resolver, make_context):
        ctx = make_context(outcomes=[False, False], global_tension=0.9)
        resolver.resolve(ctx, ESCALATE)
        assert ctx.state.global_tension == 1.0
        assert ctx.state.is_terminal()

    def test_silo_activation(self, resolver, make_context):
        ctx = make_context(outcomes=[True], accidental_escalation_risk=0.7)
        result = resolver.resolve(ctx, LEAK)

        assert ctx.state.global_tension == pytest.approx(0.35)
        assert "WARNING: UNAUTHORIZED SILO ACTIVATION DETECTED." in result.feedback

    def test_silo_spike_clamped(self, resolver, make_context):
        ctx = make_context(outcomes=[False, True], global_tension=0.9, accidental_escalation_risk=0.7)
        resolver.resolve(ctx, LEAK)
        assert ctx.state.global_tension == 1.0

    def test_silo_quiet_when_roll_fails(self, resolver, make_context):
        ctx = make_context(outcomes=[False], accidental_escalation_risk=0.7)
        result = resolver.resolve(ctx, LEAK)
        assert ctx.state.global_tension == pytest.approx(0.2)
        assert not any(line.startswith("WARNING") for line in result.feedback)

    def test_corruption_growth(self, resolver, make_context):
        ctx = make_context(secret_weapon_progress=0.8)
        resolver.resolve(ctx, LEAK)
        # progress drifts to 0.82 before corruption is computed
        assert ctx.state.system_corruption == pytest.approx(0.064)

    def test_corruption_clamped_and_basilisk_warning(self, resolver, make_context):
        ctx = make_context(outcomes=[False, True], secret_weapon_progress=1.0, system_corruption=0.99)
        result = resolver.resolve(ctx, LEAK)

        assert ctx.state.system_corruption == 1.0
        assert ctx.state.secret_weapon_progress == 1.0
        assert result.feedback[-1] == "THE BASILISK IS SPEAKING TO THE OPERATORS. THEY ARE WEEPING."

    def test_minor_directive_skips_end_of_turn(self, resolver, make_context):
        ctx = make_context(global_tension=0.5, secret_weapon_progress=0.9)
        resolver.resolve(ctx, Analyze(target="DOC-0002"))
        assert ctx.state.global_tension == pytest.approx(0.5)
        assert ctx.state.system_corruption == 0.0


# =============================================================================
# Decrypt / Analyze
# =============================================================================


class TestDecrypt:
    def test_success(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Decrypt(target="DOC-0001"))

        assert not result.turn_ended
        assert result.feedback == [
            "SUCCESS: DOCUMENT DOC-0001 DECRYPTED.",
            "CONTENT: Satellite imagery shows silo doors open.",
        ]
        assert not ctx.documents[0].is_encrypted
        assert ctx.counters.intel_points == 2

    def test_already_plain_wastes_intel(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Decrypt(target="DOC-0002"))

        assert result.feedback == ["NOTICE: DOCUMENT DOC-0002 WAS NOT ENCRYPTED. (Intel Asset Wasted)"]
        assert ctx.counters.intel_points == 2

    def test_second_decrypt_is_wasted(self, resolver, make_context):
        ctx = make_context()
        resolver.resolve(ctx, Decrypt(target="DOC-0001"))
        result = resolver.resolve(ctx, Decrypt(target="DOC-0001"))

        assert result.feedback[0].startswith("NOTICE:")
        assert ctx.counters.intel_points == 1

    def test_not_found_refunds(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Decrypt(target="DOC-FFFF"))

        assert result.feedback == ["ERROR: DOCUMENT DOC-FFFF NOT FOUND."]
        assert ctx.counters.intel_points == 3

    def test_insufficient_intel(self, resolver, make_context):
        ctx = make_context(intel=0)
        result = resolver.resolve(ctx, Decrypt(target="DOC-0001"))

        assert result.feedback == [INSUFFICIENT_INTEL]
        assert ctx.documents[0].is_encrypted
        assert not result.turn_ended

    def test_ids_compared_exactly(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Decrypt(target="doc-0001"))
        assert result.feedback[0].startswith("ERROR:")


class TestAnalyze:
    @pytest.mark.parametrize(
        "doc_id,line",
        [
            ("DOC-0001", "SOURCE RELIABILITY: 90% - HIGH (VERIFIED)"),
            ("DOC-0002", "SOURCE RELIABILITY: 60% - MODERATE (UNCERTAIN)"),
            ("DOC-0003", "SOURCE RELIABILITY: 35% - LOW (POSSIBLE DISINFORMATION)"),
        ],
    )
    def test_reliability_tiers(self, resolver, make_context, doc_id, line):
        ctx = make_context()
        result = resolver.resolve(ctx, Analyze(target=doc_id))

        assert result.feedback == [f"ANALYSIS COMPLETE: DOCUMENT {doc_id}", line]
        assert ctx.counters.intel_points == 2

    def test_encrypted_document_can_be_analyzed(self, resolver, make_context):
        ctx = make_context()
        resolver.resolve(ctx, Analyze(target="DOC-0001"))
        assert ctx.documents[0].is_encrypted

    def test_not_found_refunds(self, resolver, make_context):
        ctx = make_context(intel=1)
        result = resolver.resolve(ctx, Analyze(target="DOC-9999"))
        assert result.feedback == ["ERROR: DOCUMENT DOC-9999 NOT FOUND."]
        assert ctx.counters.intel_points == 1

    def test_insufficient_intel(self, resolver, make_context):
        ctx = make_context(intel=0)
        result = resolver.resolve(ctx, Analyze(target="DOC-0001"))
        assert result.feedback == [INSUFFICIENT_INTEL]


# =============================================================================
# Trace
# =============================================================================


class TestTrace:
    def test_requires_interrupt(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Trace(target="volkov"))

        assert result.feedback == ["TRACE FAILED: NO ACTIVE SIGNAL INTERRUPTION TO LOCK ONTO."]
        assert ctx.counters.intel_points == 3
        assert ctx.state.advisors[0].suspicion == 0

    def test_clean_advisor(self, resolver, make_context):
        ctx = make_context(interruption=True)
        result = resolver.resolve(ctx, Trace(target="hale"))

        assert result.feedback[0] == "TRACE INITIATED... SIGNAL LOCK ESTABLISHED."
        assert result.feedback[1] == ">> NO MATCH: DEVICES REGISTERED TO DIRECTOR HALE ARE CLEAN."
        assert ctx.counters.intel_points == 2
        assert ctx.counters.trace_count == 1
        assert ctx.counters.traced_advisors == ["Director Hale"]
        assert not ctx.state.red_phone_active

    def test_mole_confirmed(self, resolver, make_context):
        ctx = make_context(interruption=True)
        result = resolver.resolve(ctx, Trace(target="military"))

        volkov = ctx.state.advisors[0]
        assert volkov.suspicion == 100
        assert ctx.state.red_phone_active
        assert result.feedback[-1] == MOLE_CONFIRMED
        assert not result.turn_ended

    def test_mole_suspicion_never_lowered(self, resolver, make_context):
        ctx = make_context(interruption=True)
        ctx.state.advisors[0].suspicion = 140
        resolver.resolve(ctx, Trace(target="volkov"))
        assert ctx.state.advisors[0].suspicion == 140

    def test_duplicate_target_rejected(self, resolver, make_context):
        ctx = make_context(interruption=True)
        resolver.resolve(ctx, Trace(target="hale"))
        result = resolver.resolve(ctx, Trace(target="Intelligence"))

        assert result.feedback == ["FAILURE: DIRECTOR HALE HAS ALREADY BEEN TRACED THIS TURN."]
        assert ctx.counters.intel_points == 2
        assert ctx.counters.trace_count == 1

    def test_per_turn_cap(self, resolver, make_context):
        ctx = make_context(interruption=True)
        resolver.resolve(ctx, Trace(target="hale"))
        resolver.resolve(ctx, Trace(target="reyes"))
        result = resolver.resolve(ctx, Trace(target="volkov"))

        assert result.feedback == ["FAILURE: TRACE CAPACITY EXHAUSTED FOR THIS TURN."]
        assert ctx.counters.intel_points == 1
        assert ctx.state.advisors[0].suspicion == 0

    def test_unknown_advisor_refunds(self, resolver, make_context):
        ctx = make_context(interruption=True)
        result = resolver.resolve(ctx, Trace(target="khrushchev"))

        assert result.feedback == ["ERROR: ADVISOR 'khrushchev' NOT FOUND."]
        assert ctx.counters.intel_points == 3
        assert ctx.counters.trace_count == 0

    def test_insufficient_intel(self, resolver, make_context):
        ctx = make_context(intel=0, interruption=True)
        result = resolver.resolve(ctx, Trace(target="hale"))
        assert result.feedback == [INSUFFICIENT_INTEL]


# =============================================================================
# Consult
# =============================================================================


class TestConsult:
    def test_first_consult_free(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Consult(target="reyes"))

        assert result.feedback[0] == "CONSULTING WITH AMBASSADOR REYES... (STANDARD PROTOCOL)"
        assert result.feedback[1].startswith('"') and result.feedback[1].endswith('"')
        assert ctx.counters.intel_points == 3
        assert ctx.counters.consult_count == 1

    def test_second_consult_costs_intel(self, resolver, make_context):
        ctx = make_context()
        resolver.resolve(ctx, Consult(target="reyes"))
        result = resolver.resolve(ctx, Consult(target="reyes"))

        assert result.feedback[0] == "CONSULTING WITH AMBASSADOR REYES... (INTEL COST: 1)"
        assert ctx.counters.intel_points == 2
        assert ctx.counters.consult_count == 2

    def test_paid_consult_without_intel(self, resolver, make_context):
        ctx = make_context(intel=0)
        resolver.resolve(ctx, Consult(target="hale"))
        result = resolver.resolve(ctx, Consult(target="hale"))

        assert result.feedback == ["FAILURE: INSUFFICIENT INTEL ASSETS FOR ADDITIONAL CONSULTATION."]
        assert ctx.counters.consult_count == 1

    def test_unknown_advisor_keeps_free_consult(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Consult(target="nobody"))
        assert result.feedback == ["ERROR: ADVISOR 'nobody' NOT FOUND."]
        assert ctx.counters.consult_count == 0

        result = resolver.resolve(ctx, Consult(target="hale"))
        assert result.feedback[0].endswith("(STANDARD PROTOCOL)")

    def test_unknown_advisor_refunds_paid_consult(self, resolver, make_context):
        ctx = make_context()
        resolver.resolve(ctx, Consult(target="hale"))
        resolver.resolve(ctx, Consult(target="nobody"))
        assert ctx.counters.intel_points == 3
        assert ctx.counters.consult_count == 1

    def test_mole_gives_dangerous_advice(self, resolver, make_context):
        ctx = make_context(global_tension=0.75)
        result = resolver.resolve(ctx, Consult(target="volkov"))
        assert "(Recommend: ESCALATE)" in result.feedback[1]

    def test_loyal_advice(self, resolver, make_context):
        ctx = make_context(global_tension=0.75)
        result = resolver.resolve(ctx, Consult(target="reyes"))
        assert "(Recommend: CONTAIN)" in result.feedback[1]


# =============================================================================
# Interrogate
# =============================================================================


class TestInterrogate:
    def test_requires_two_intel(self, resolver, make_context):
        ctx = make_context(intel=1)
        result = resolver.resolve(ctx, Interrogate(target="hale"))

        assert result.feedback == ["FAILURE: INTERROGATION REQUIRES 2 INTEL ASSETS."]
        assert ctx.counters.intel_points == 1
        assert ctx.state.advisors[1].suspicion == 0

    def test_loyal_military_advisor(self, resolver, make_context):
        ctx = make_context(mole="Director Hale")
        result = resolver.resolve(ctx, Interrogate(target="volkov"))

        assert result.feedback[0] == "INTERROGATING GENERAL VOLKOV... (INTEL COST: 2)"
        assert result.feedback[-1] == "SUSPICION: GENERAL VOLKOV NOW AT 20."
        assert ctx.state.advisors[0].suspicion == 20
        assert ctx.state.domestic_stability == pytest.approx(0.75)
        assert ctx.counters.intel_points == 1
        assert not result.turn_ended

    def test_loyal_intelligence_advisor(self, resolver, make_context):
        ctx = make_context()
        resolver.resolve(ctx, Interrogate(target="hale"))
        assert ctx.state.internal_secrecy == pytest.approx(0.45)

    def test_loyal_distress_clamped(self, resolver, make_context):
        ctx = make_context(foreign_paranoia=1.0)
        resolver.resolve(ctx, Interrogate(target="reyes"))
        assert ctx.state.foreign_paranoia == 1.0

    def test_mole_deception(self, resolver, make_context):
        ctx = make_context(outcomes=[True])
        result = resolver.resolve(ctx, Interrogate(target="volkov"))

        assert DECEPTION_LINE in result.feedback
        assert ctx.state.advisors[0].suspicion == 35
        assert ctx.state.domestic_stability == pytest.approx(0.8)

    def test_mole_deflection(self, resolver, make_context):
        ctx = make_context(outcomes=[False])
        result = resolver.resolve(ctx, Interrogate(target="volkov"))

        assert DEFLECTION_LINE in result.feedback
        assert ctx.state.advisors[0].suspicion == 20

    def test_mole_exposed(self, resolver, make_context):
        ctx = make_context(outcomes=[True])
        ctx.state.advisors[0].suspicion = 80
        result = resolver.resolve(ctx, Interrogate(target="volkov"))

        assert ctx.state.advisors[0].suspicion == 115
        assert ctx.state.red_phone_active
        assert result.feedback[-1] == MOLE_CONFIRMED

    def test_loyal_advisor_over_threshold_is_not_confirmed(self, resolver, make_context):
        ctx = make_context()
        ctx.state.advisors[1].suspicion = 90
        result = resolver.resolve(ctx, Interrogate(target="hale"))

        assert ctx.state.advisors[1].suspicion == 110
        assert not ctx.state.red_phone_active
        assert MOLE_CONFIRMED not in result.feedback

    def test_duplicate_target_rejected(self, resolver, make_context):
        ctx = make_context(intel=4)
        resolver.resolve(ctx, Interrogate(target="hale"))
        result = resolver.resolve(ctx, Interrogate(target="director"))

        assert result.feedback == ["FAILURE: DIRECTOR HALE HAS ALREADY BEEN INTERROGATED THIS TURN."]
        assert ctx.counters.intel_points == 2
        assert ctx.state.advisors[1].suspicion == 20

    def test_per_turn_cap(self, resolver, make_context):
        ctx = make_context(intel=6)
        resolver.resolve(ctx, Interrogate(target="hale"))
        resolver.resolve(ctx, Interrogate(target="reyes"))
        result = resolver.resolve(ctx, Interrogate(target="volkov"))

        assert result.feedback == ["FAILURE: INTERROGATION CAPACITY EXHAUSTED FOR THIS TURN."]
        assert ctx.counters.intel_points == 2
        assert ctx.state.advisors[0].suspicion == 0

    def test_unknown_advisor_refunds(self, resolver, make_context):
        ctx = make_context()
        result = resolver.resolve(ctx, Interrogate(target="nobody"))

        assert result.feedback == ["ERROR: ADVISOR 'nobody' NOT FOUND."]
        assert ctx.counters.intel_points == 3
        assert ctx.counters.interrogate_count == 0


class TestResolverDispatch:
    def test_every_kind_has_handler(self, resolver):
        assert set(resolver._handlers) == set(DirectiveKind)

    @pytest.mark.parametrize(
        "directive",
        [
            Decrypt(target="DOC-0001"),
            Analyze(target="DOC-0001"),
            Trace(target="hale"),
            Consult(target="hale"),
            Interrogate(target="hale"),
        ],
    )
    def test_minor_directives_never_end_turn(self, resolver, make_context, directive):
        ctx = make_context(interruption=True)
        assert resolver.resolve(ctx, directive).turn_ended is False
