"""Best-Practice Governance Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.errors import GovernanceError  # noqa: E402
from app.models.core import Voter  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import committees, practices, voting  # noqa: E402
from web.api.errors import error_response  # noqa: E402


@st.cache_resource
def _bootstrap() -> bool:
    setup_logging()
    container.init()
    return True


st.set_page_config(page_title="Best-Practice Governance", page_icon="🗳️", layout="wide")

_bootstrap()

COLORS = {"voted": "#22C55E", "pending": "#9CA3AF"}
ROLES = ["Member", "Editor", "Admin"]


def show_error(exc: GovernanceError) -> None:
    body = error_response(exc)
    st.error(f"{body.message} ({body.code})")
    if body.details:
        st.json(body.details)


def participation_chart(rounds: dict) -> go.Figure:
    """Stacked bar of voted vs pending members per round."""
    names = list(rounds.keys())
    voted = [r.voted for r in rounds.values()]
    pending = [r.total - r.voted for r in rounds.values()]
    return go.Figure(
        data=[
            go.Bar(name="Voted", x=names, y=voted, marker_color=COLORS["voted"], text=voted),
            go.Bar(name="Pending", x=names, y=pending, marker_color=COLORS["pending"], text=pending),
        ]
    ).update_layout(barmode="stack", margin=dict(t=20, b=40, l=40, r=20), height=300)


def identity() -> Voter:
    """Identity is supplied by the host system; the sidebar stands in for it."""
    st.sidebar.header("Identity")
    matricula = st.sidebar.number_input("Matricula", min_value=1, value=1, step=1)
    contract = st.sidebar.text_input("Contract", value="")
    role = st.sidebar.selectbox("Role", ROLES, index=0)
    return Voter(matricula=int(matricula), contract_code=contract.strip() or None, role=role)


def ballot_form(practice_id: str, voter: Voter, round: str):
    try:
        ctx = voting.get_voting_context(practice_id, voter, round)
    except GovernanceError as e:
        show_error(e)
        return

    if ctx.description:
        st.write(ctx.description)
    st.caption(" → ".join(f"**{s.name}**" if s.active else s.name for s in ctx.stages))

    with st.form(f"ballot-{round}-{practice_id}"):
        answers = {
            q.id: st.radio(
                f"{q.id.upper()} (weight {q.weight})",
                ctx.levels,
                index=None,
                horizontal=True,
                key=f"answer-{round}-{practice_id}-{q.id}",
            )
            for q in ctx.questions
        }
        if st.form_submit_button("Cast vote"):
            try:
                receipt = voting.cast_vote(practice_id, voter, round, {"answers": answers})
            except GovernanceError as e:
                show_error(e)
            else:
                logger.info("Dashboard vote: {} on {}", voter.matricula, practice_id)
                st.success(f"Vote recorded. Score: {receipt.score}")


def ballots_tab(voter: Voter):
    """Open ballots for the selected round."""
    round = st.radio("Round", ["quarterly", "annual"], horizontal=True)
    try:
        ballots = voting.get_open_ballots(voter, round)
    except GovernanceError as e:
        show_error(e)
        return

    if not ballots.items:
        st.info("Nothing to vote on.")
        return

    st.subheader(f"🗳️ {ballots.total} open ballots")
    for item in ballots.items:
        with st.expander(f"**{item.title or item.id}** ({item.contract_code or 'no contract'})"):
            st.write(f"Author: {item.author_name or 'unknown'}")
            ballot_form(item.id, voter, round)


def strategic_tab(voter: Voter):
    """Governance progress of one practice."""
    practice_id = st.text_input("Practice id")
    if not practice_id:
        return

    try:
        view = practices.get_strategic_view(practice_id, voter)
    except GovernanceError as e:
        show_error(e)
        return

    cols = st.columns(3)
    cols[0].metric("Status", view.status)
    cols[1].metric("Contract", view.contract_code or "-")
    cols[2].metric("Relevance", view.relevance if view.relevance is not None else "-")
    if not view.status_recognized:
        st.warning("Status text is not a known pipeline phrase.")

    steps = [f"✅ {s.name}" if s.completed else f"**{s.name}**" if s.active else s.name for s in view.stages]
    st.caption(" → ".join(steps))

    st.subheader("📋 Evaluations")
    for label, step in (("SESMT", view.sesmt), ("Management", view.management)):
        who = step.responsible.name or step.responsible.matricula if step.responsible else "unassigned"
        st.write(f"{'✅' if step.done else '⏳'} **{label}**: {who}")

    st.subheader("🤝 Committee Participation")
    rounds = {"Quarterly": view.quarterly, "Annual": view.annual}
    st.plotly_chart(participation_chart(rounds), width="stretch")

    for label, data in rounds.items():
        name = data.committee.name if data.committee else "no committee"
        with st.expander(f"{label}: {name} ({data.voted}/{data.total})"):
            for p in data.participants:
                st.write(f"{'✅' if p.voted else '⏳'} {p.name or p.matricula}")


def committees_tab(voter: Voter):
    """Committee listing and creation."""
    cols = st.columns(3)
    kind = cols[0].selectbox("Kind", ["", "local", "corporate"], key="filter-kind")
    search = cols[1].text_input("Search")
    page = cols[2].number_input("Page", min_value=1, value=1, step=1)

    try:
        data = committees.list_committees(kind or None, search or None, int(page))
    except GovernanceError as e:
        show_error(e)
        return

    st.caption(f"{data.pagination.total} committees, page {data.pagination.page}/{data.pagination.total_pages or 1}")
    for c in data.items:
        scope = f", {c.contract_name or c.contract_code}" if c.contract_code else ""
        with st.expander(f"**{c.name}** ({c.kind}{scope})"):
            if c.description:
                st.write(c.description)
            st.write(", ".join(m.name or str(m.matricula) for m in c.members) or "No members")
            if st.button("Delete", key=f"delete-{c.id}"):
                try:
                    committees.delete_committee(c.id, voter)
                except GovernanceError as e:
                    show_error(e)
                else:
                    st.rerun()

    st.subheader("➕ New Committee")
    with st.form("committee-new"):
        name = st.text_input("Name")
        new_kind = st.selectbox("Kind", ["local", "corporate"], key="new-kind")
        contract = st.text_input("Contract (local only)")
        candidates = committees.list_candidates(contract.strip() or None).items
        members = st.multiselect(
            "Members",
            [u.matricula for u in candidates],
            format_func=lambda m: next((f"{u.name} ({m})" for u in candidates if u.matricula == m), str(m)),
        )
        description = st.text_area("Description")
        if st.form_submit_button("Create"):
            payload = {
                "name": name,
                "kind": new_kind,
                "contract_code": contract.strip() or None,
                "members": members,
                "description": description,
            }
            try:
                created = committees.create_committee(payload, voter)
            except GovernanceError as e:
                show_error(e)
            else:
                st.success(f"Committee {created.name} created")


def main():
    st.title("🗳️ Best-Practice Governance")
    st.markdown("*Committee voting and strategic view of submitted best practices*")

    voter = identity()

    tab1, tab2, tab3 = st.tabs(["🗳️ Ballots", "🧭 Strategic View", "🤝 Committees"])

    with tab1:
        ballots_tab(voter)

    with tab2:
        strategic_tab(voter)

    with tab3:
        committees_tab(voter)


if __name__ == "__main__":
    main()
