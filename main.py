"""
Entry point for SynergyAI — Brand Partnership Evaluator.

Usage:
  # Evaluate the default pairing (needs GEMINI_API_KEY; TRACXN_API_KEY optional):
  python main.py demo

  # Start the FastAPI server:
  python main.py api

  # Start the Streamlit dashboard:
  python main.py dashboard

  # Run tests:
  python main.py test
"""

from __future__ import annotations

import os
import sys
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("main")


def demo():
    """
    Evaluate the default brand pairing with the default weights.
    Prints a formatted report to stdout.
    """
    from agents import PartnershipOrchestrator
    from agents.exceptions import AnalysisError
    from config.settings import settings
    from models.schemas import EvaluationForm

    logger.info("=== SynergyAI — Demo Run ===")

    form = EvaluationForm(
        brand_a=settings.DEFAULT_BRAND_A,
        brand_b=settings.DEFAULT_BRAND_B,
        scope=settings.DEFAULT_SCOPE,
        geography=settings.DEFAULT_GEOGRAPHY,
    )
    orchestrator = PartnershipOrchestrator(settings=settings)

    try:
        result = orchestrator.evaluate(form)
    except AnalysisError as e:
        print(f"\n❌ Evaluation failed: {e}")
        sys.exit(1)

    # ── Print report ──────────────────────────────────────────────────────
    print("\n" + "=" * 70)
    print("  BRAND PARTNERSHIP ASSESSMENT")
    print("=" * 70)
    print(f"  Brands         : {form.brand_a} × {form.brand_b}")
    print(f"  Scope          : {form.scope}")
    print(f"  Geography      : {form.geography}")
    print(f"  Tracxn data    : A={orchestrator.fetch_status.a}  B={orchestrator.fetch_status.b}")
    print(f"  Synergy score  : {result.final_percentage}%  (raw sum {result.raw_sum:g})")
    print(f"  Recommendation : {result.recommendation}")
    print(f"  Suggested model: {result.suggested_model}")
    print("=" * 70)

    print("\n📝 EXECUTIVE SUMMARY")
    print("-" * 70)
    print(f"  {result.executive_summary}")

    print("\n📊 SCORECARD")
    print("-" * 70)
    for p in result.parameters:
        score = f"{p.weighted_score:.1f}" if p.weighted_score is not None else "—"
        print(f"  {p.name:<40} w={p.weight:>3}  rating={p.rating}  score={score}")
        if p.rationale:
            print(f"       {p.rationale}")

    print("\n💡 CONCEPTS")
    print("-" * 70)
    for c in result.concepts:
        print(f"  • {c.title}: {c.description}")

    print("\n⚠️  RISKS")
    print("-" * 70)
    for r in result.risks:
        print(f"  • {r.risk}")
        print(f"      ↳ {r.mitigation}")

    if result.sources:
        print("\n🔗 SOURCES")
        print("-" * 70)
        for src in result.sources:
            print(f"  {src}")
    print("=" * 70)

    return result


def start_api():
    """Start the FastAPI server."""
    try:
        import uvicorn
    except ImportError:
        print("Error: install uvicorn first:  pip install uvicorn")
        sys.exit(1)
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)


def start_dashboard():
    """Launch the Streamlit dashboard."""
    import subprocess
    dashboard_path = os.path.join(os.path.dirname(__file__), "dashboard", "app.py")
    subprocess.run([sys.executable, "-m", "streamlit", "run", dashboard_path], check=True)


def run_tests():
    """Run pytest."""
    import subprocess
    result = subprocess.run(
        ["pytest", "tests/", "-v", "--tb=short"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


if __name__ == "__main__":
    command = sys.argv[1] if len(sys.argv) > 1 else "demo"

    if command == "demo":
        demo()
    elif command == "api":
        start_api()
    elif command == "dashboard":
        start_dashboard()
    elif command == "test":
        run_tests()
    else:
        print(f"Unknown command: {command}")
        print("Usage: python main.py [demo|api|dashboard|test]")
        sys.exit(1)
