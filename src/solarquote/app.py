"""SolarQuote — Streamlit app for managing prospects, solar projects, and quotes."""

import datetime
import logging
import os
from typing import Any

import httpx
import pandas as pd
import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from solarquote.auth import AuthError, get_user, sign_in, sign_out  # noqa: E402
from solarquote.compute import GeocodingError, geocode_address, quote_total, run  # noqa: E402
from solarquote.formatting import format_currency, format_date, format_number  # noqa: E402
from solarquote.i18n import status_label, t  # noqa: E402
from solarquote.listing import (  # noqa: E402
    client_stats,
    dashboard_stats,
    filter_clients,
    filter_projects,
    filter_projects_for_quote,
    project_stats,
)
from solarquote.logs import setup_logging  # noqa: E402
from solarquote.models import (  # noqa: E402
    PROJECT_STATUSES,
    Client,
    PanelArrayConfig,
    PanelsConfig,
    Project,
    QuoteItem,
    RoofData,
    SavingsProjection,
    SimulationInput,
    SiteLocation,
    SiteOrientation,
)
from solarquote.notifications import drain_notices, push_notice  # noqa: E402
from solarquote.renderers.plotly_savings import render_savings_chart  # noqa: E402
from solarquote.renderers.roof_svg import render_roof_svg  # noqa: E402
from solarquote.store import NotFoundError, StoreError, SupabaseStore, store_from_env  # noqa: E402
from solarquote.validation import (  # noqa: E402
    validate_client_form,
    validate_login_form,
    validate_project_form,
    validate_quote_form,
)

setup_logging()
log = logging.getLogger("solarquote.app")

_NOTICE_ICONS = {"success": "✅", "error": "❌", "info": "ℹ️", "warning": "⚠️"}
_NEW_QUOTE_STATUSES = ("draft", "sent")
_PAGES = ("dashboard", "clients", "projects", "new_quote")
# Prefilled in the simulation form when the roof has no coordinates yet
_DEFAULT_SITE = SiteLocation(lat=45.0, lng=0.0)


def _init_state() -> None:
    defaults: dict[str, Any] = {
        "session": None,
        "page": "dashboard",
        "view": "list",  # list | detail | new | edit
        "selected_id": None,
        "preselected_id": None,  # Client for a new project, project for a new quote
        "notices": [],
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _detect_lang() -> str:
    # navigator.language is read once and cached in session_state.
    # On the first run the JS call returns None; the rerun fills it in.
    if "lang" not in st.session_state:
        browser_lang: str | None = streamlit_js_eval(
            js_expressions="navigator.language", key="_lang_detect", height=0
        )
        if browser_lang is not None:
            st.session_state.lang = "en" if browser_lang.lower().startswith("en") else "fr"
    return st.session_state.get("lang", "fr")


def _go(page: str, view: str = "list", selected_id: str | None = None, preselected_id: str | None = None) -> None:
    st.session_state.page = page
    st.session_state.view = view
    st.session_state.selected_id = selected_id
    st.session_state.preselected_id = preselected_id
    st.rerun()


def _show_errors(errors: dict[str, str]) -> None:
    st.error("\n".join(f"• {msg}" for msg in errors.values()))


def _show_notices() -> None:
    for notice in drain_notices(st.session_state):
        text = notice.title if not notice.description else f"{notice.title} — {notice.description}"
        st.toast(text, icon=_NOTICE_ICONS.get(notice.kind))


# --- Login ---


def _page_login(lang: str) -> None:
    st.title(t("page_title", lang))
    _, col, _ = st.columns([1, 2, 1])
    with col:
        with st.form("login"):
            email = st.text_input(t("label_email", lang))
            password = st.text_input(t("label_password", lang), type="password")
            submitted = st.form_submit_button(t("btn_sign_in", lang), use_container_width=True)
        if not submitted:
            return
        errors = validate_login_form({"email": email, "password": password})
        if errors:
            _show_errors(errors)
            return
        try:
            st.session_state.session = sign_in(
                os.environ["SUPABASE_URL"], os.environ["SUPABASE_ANON_KEY"], email, password
            )
        except AuthError:
            st.error(t("error_sign_in", lang))
            return
        except httpx.HTTPError as e:
            log.warning("sign-in unavailable: %s", e)
            st.error(t("error_network", lang).format(error=e))
            return
        _go("dashboard")


def _drop_session() -> None:
    store = st.session_state.pop("store", None)
    if store is not None:
        store.close()
    st.session_state.session = None
    st.session_state.session_checked = False


def _store() -> SupabaseStore:
    """One store per signed-in session; dialogs rerun with the same instance."""
    if st.session_state.get("store") is None:
        st.session_state.store = store_from_env(st.session_state.session.access_token)
    return st.session_state.store


def _verify_session(lang: str) -> bool:
    """Drop the session when its token is no longer accepted."""
    session = st.session_state.session
    if session is None:
        return False
    if st.session_state.get("session_checked"):
        return True
    try:
        get_user(os.environ["SUPABASE_URL"], os.environ["SUPABASE_ANON_KEY"], session.access_token)
    except AuthError:
        _drop_session()
        return False
    except httpx.HTTPError as e:
        log.warning("session check unavailable: %s", e)
        st.error(t("error_network", lang).format(error=e))
        st.stop()
    st.session_state.session_checked = True
    return True


# --- Dashboard ---


def _page_dashboard(store: SupabaseStore, user_id: str, lang: str) -> None:
    st.header(t("nav_dashboard", lang))
    projects = store.list_projects(user_id)
    clients = store.list_clients(user_id)
    quotes = store.list_quotes(user_id)
    stats = dashboard_stats(projects, clients, quotes)

    c1, c2, c3 = st.columns(3)
    c1.metric(t("stat_projects", lang), stats.total_projects)
    c2.metric(t("stat_clients", lang), stats.total_clients)
    c3.metric(t("stat_quotes", lang), stats.total_quotes)
    c4, c5, c6 = st.columns(3)
    c4.metric(t("stat_production", lang), format_number(stats.total_production))
    c5.metric(t("stat_savings", lang), format_currency(stats.total_savings))
    c6.metric(t("stat_conversion", lang), f"{format_number(stats.conversion_rate, 1)} %")

    st.subheader(t("nav_projects", lang))
    for project in projects[:5]:
        _project_row(project, lang, key_prefix="dash")


# --- Clients ---


def _page_clients(store: SupabaseStore, user_id: str, lang: str) -> None:
    view = st.session_state.view
    if view == "detail":
        _client_detail(store, user_id, lang)
    elif view in ("new", "edit"):
        _client_form(store, user_id, lang)
    else:
        _client_list(store, user_id, lang)


@st.dialog("Confirmation")
def _confirm_delete_client(store: SupabaseStore, user_id: str, client: Client, lang: str) -> None:
    st.write(t("confirm_delete_client", lang).format(name=client.full_name))
    c1, c2 = st.columns(2)
    if c1.button(t("btn_cancel", lang), use_container_width=True):
        st.rerun()
    if c2.button(t("btn_delete", lang), type="primary", use_container_width=True):
        store.delete_client(client.id, user_id)
        push_notice(st.session_state, "success", t("notice_deleted", lang), client.full_name)
        _go("clients")


def _client_list(store: SupabaseStore, user_id: str, lang: str) -> None:
    head, action = st.columns([4, 1])
    head.header(t("nav_clients", lang))
    if action.button("＋", key="new_client", use_container_width=True):
        _go("clients", "new")

    clients = store.list_clients(user_id)
    term = st.text_input(t("label_search", lang), key="client_search")
    shown = filter_clients(clients, term)
    stats = client_stats(clients, shown)

    if not shown:
        st.info(t("empty_clients", lang))
    for client in shown:
        with st.container(border=True):
            c1, c2, c3, c4 = st.columns([3, 3, 2, 2])
            c1.markdown(f"**{client.full_name}**  \n{client.city}")
            c2.write(client.email)
            c3.caption(format_date(client.created_at))
            if c4.button("→", key=f"view_{client.id}"):
                _go("clients", "detail", client.id)
            if c4.button("🗑", key=f"del_{client.id}"):
                _confirm_delete_client(store, user_id, client, lang)

    m1, m2, m3 = st.columns(3)
    m1.metric("Total", stats["total"])
    m2.metric("PDL", stats["with_pdl"])
    m3.metric("Affichés" if lang == "fr" else "Shown", stats["shown"])


def _client_detail(store: SupabaseStore, user_id: str, lang: str) -> None:
    client = store.get_client(st.session_state.selected_id, user_id)
    st.header(client.full_name)
    c1, c2, c3 = st.columns(3)
    if c1.button(t("btn_edit", lang), use_container_width=True):
        _go("clients", "edit", client.id)
    if c2.button("＋ " + t("nav_projects", lang), use_container_width=True):
        _go("projects", "new", preselected_id=client.id)
    if c3.button(t("btn_delete", lang), use_container_width=True):
        _confirm_delete_client(store, user_id, client, lang)

    st.markdown(
        f"📧 {client.email}  \n📞 {client.phone}  \n"
        f"🏠 {client.address}, {client.postal_code} {client.city}  \n"
        f"⚡ PDL : {client.pdl or '—'}"
    )
    st.caption(format_date(client.created_at))
    st.subheader(t("nav_projects", lang))
    for project in store.list_projects(user_id, client_id=client.id):
        _project_row(project, lang, key_prefix="client")


def _client_form(store: SupabaseStore, user_id: str, lang: str) -> None:
    editing = st.session_state.view == "edit"
    current = store.get_client(st.session_state.selected_id, user_id) if editing else None
    st.header(current.full_name if current else "Nouveau prospect")

    def value(attr: str) -> str:
        return getattr(current, attr) if current else ""

    with st.form("client_form"):
        c1, c2 = st.columns(2)
        form = {
            "first_name": c1.text_input("Prénom", value("first_name")),
            "last_name": c2.text_input("Nom", value("last_name")),
            "email": c1.text_input("Email", value("email")),
            "phone": c2.text_input("Téléphone", value("phone"), placeholder="06 12 34 56 78"),
            "address": st.text_input("Adresse", value("address")),
        }
        c3, c4 = st.columns(2)
        form["city"] = c3.text_input("Ville", value("city"))
        form["postal_code"] = c4.text_input("Code postal", value("postal_code"), max_chars=5)
        form["pdl"] = st.text_input(
            "Point de Livraison (PDL)", value("pdl"), max_chars=14, placeholder="12345678901234"
        )
        submitted = st.form_submit_button(t("btn_save", lang), type="primary")
    if st.button(t("btn_cancel", lang)):
        _go("clients", "detail" if editing else "list", st.session_state.selected_id)
    if not submitted:
        return

    errors = validate_client_form(form)
    if errors:
        _show_errors(errors)
        return
    fields = {k: v.strip() for k, v in form.items()}
    if editing:
        client = store.update_client(current.id, user_id, fields)
        push_notice(st.session_state, "success", t("notice_saved", lang))
    else:
        client = store.create_client(user_id, fields)
        push_notice(st.session_state, "success", t("notice_created", lang), client.full_name)
    _go("clients", "detail", client.id)


# --- Projects ---


def _project_row(project: Project, lang: str, key_prefix: str) -> None:
    with st.container(border=True):
        c1, c2, c3, c4 = st.columns([3, 2, 2, 1])
        client_name = project.client.full_name if project.client else ""
        c1.markdown(f"**{project.name}**  \n{client_name}")
        c2.write(status_label(project.status, lang))
        if project.annual_savings:
            c3.write(format_currency(project.annual_savings) + ("/an" if lang == "fr" else "/yr"))
        c3.caption(format_date(project.created_at))
        if c4.button("→", key=f"{key_prefix}_project_{project.id}"):
            _go("projects", "detail", project.id)


def _page_projects(store: SupabaseStore, user_id: str, lang: str) -> None:
    view = st.session_state.view
    if view == "detail":
        _project_detail(store, user_id, lang)
    elif view in ("new", "edit"):
        _project_form(store, user_id, lang)
    else:
        _project_list(store, user_id, lang)


def _project_list(store: SupabaseStore, user_id: str, lang: str) -> None:
    head, action = st.columns([4, 1])
    head.header(t("nav_projects", lang))
    if action.button("＋", key="new_project", use_container_width=True):
        _go("projects", "new")

    projects = store.list_projects(user_id)
    stats = project_stats(projects)
    m1, m2, m3, m4, m5 = st.columns(5)
    m1.metric("Total", stats["total"])
    m2.metric(status_label("completed", lang), stats["completed"])
    m3.metric(status_label("in_progress", lang), stats["in_progress"])
    m4.metric("kWh/an", format_number(stats["total_production"]))
    m5.metric("€/an", format_currency(stats["total_savings"]))

    c1, c2 = st.columns([3, 1])
    term = c1.text_input(t("label_search", lang), key="project_search")
    status = c2.selectbox(
        t("label_status", lang),
        ("",) + PROJECT_STATUSES,
        format_func=lambda s: status_label(s, lang) if s else t("all_statuses", lang),
    )
    shown = filter_projects(projects, term, status)
    if not shown:
        st.info(t("empty_projects", lang))
    for project in shown:
        _project_row(project, lang, key_prefix="list")


@st.dialog("Confirmation")
def _confirm_delete_project(store: SupabaseStore, user_id: str, project: Project, lang: str) -> None:
    st.write(t("confirm_delete_project", lang).format(name=project.name))
    c1, c2 = st.columns(2)
    if c1.button(t("btn_cancel", lang), use_container_width=True):
        st.rerun()
    if c2.button(t("btn_delete", lang), type="primary", use_container_width=True):
        store.delete_project(project.id, user_id)
        push_notice(st.session_state, "success", t("notice_deleted", lang), project.name)
        _go("projects")


def _project_detail(store: SupabaseStore, user_id: str, lang: str) -> None:
    project = store.get_project(st.session_state.selected_id, user_id)
    st.header(project.name)
    st.caption(
        f"{status_label(project.status, lang)} · "
        f"{project.client.full_name if project.client else ''} · "
        f"{format_date(project.created_at)}"
    )
    c1, c2, c3 = st.columns(3)
    if c1.button(t("btn_edit", lang), use_container_width=True):
        _go("projects", "edit", project.id)
    if c2.button(t("nav_new_quote", lang), use_container_width=True):
        _go("new_quote", preselected_id=project.id)
    if c3.button(t("btn_delete", lang), use_container_width=True):
        _confirm_delete_project(store, user_id, project, lang)
    if project.description:
        st.write(project.description)

    results = project.simulation_results
    if results is not None:
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("kWh/an", format_number(results.annual_production))
        m2.metric("€/an", format_currency(results.annual_savings))
        m3.metric("€/mois", format_currency(results.monthly_savings))
        m4.metric("20 ans", format_currency(results.twenty_year_savings))
        if results.payback_period is not None:
            st.caption(f"Retour sur investissement : {format_number(results.payback_period, 1)} ans")
        projection = SavingsProjection(
            annual_savings=results.annual_savings,
            monthly_savings=results.monthly_savings,
            twenty_year_savings=results.twenty_year_savings,
        )
        fig = render_savings_chart(projection, results.payback_period, lang=lang)
        st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    if project.panels_config.panel_count:
        st.markdown(
            render_roof_svg(project.roof_data, project.panels_config, title=project.roof_data.address),
            unsafe_allow_html=True,
        )

    _simulation_form(store, user_id, project, lang)

    st.subheader(t("stat_quotes", lang))
    for quote in store.list_quotes(user_id, project_id=project.id):
        with st.container(border=True):
            q1, q2, q3 = st.columns([3, 2, 2])
            q1.markdown(f"**{quote.quote_number or quote.name}**  \n{quote.name}")
            q2.write(format_currency(quote.total_amount))
            q3.write(status_label(quote.status, lang))


def _simulation_form(store: SupabaseStore, user_id: str, project: Project, lang: str) -> None:
    roof = project.roof_data
    panels = project.panels_config
    fallback = roof.location_or(_DEFAULT_SITE)
    with st.expander(t("btn_simulate", lang), expanded=project.simulation_results is None):
        address = st.text_input("Adresse du toit", roof.address, key="roof_address")
        if st.button(t("btn_geocode", lang)):
            try:
                located = geocode_address(address)
            except GeocodingError as e:
                st.error(t("error_address", lang).format(error=e))
            else:
                st.session_state.sim_lat = located.lat
                st.session_state.sim_lng = located.lng
        with st.form("simulation"):
            c1, c2 = st.columns(2)
            panel_count = c1.number_input("Nombre de panneaux", 0, 500, panels.panel_count or 10)
            panel_wattage = c2.number_input("Puissance par panneau (kWc)", 0.05, 2.0, min(max(panels.panel_wattage, 0.05), 2.0), 0.01)
            orientation = c1.number_input("Orientation (°, 180 = sud)", 0.0, 360.0, roof.orientation % 360)
            tilt = c2.number_input("Inclinaison (°)", 0.0, 90.0, min(max(roof.tilt, 0.0), 90.0))
            lat = c1.number_input(
                "Latitude", -90.0, 90.0, float(st.session_state.get("sim_lat", fallback.lat)), format="%.5f"
            )
            lng = c2.number_input(
                "Longitude", -180.0, 180.0, float(st.session_state.get("sim_lng", fallback.lng)), format="%.5f"
            )
            price = c1.number_input("Prix de l'électricité (€/kWh)", 0.0, 2.0, 0.20, 0.01)
            cost = c2.number_input("Coût de l'installation (€)", 0.0, value=0.0, step=100.0)
            submitted = st.form_submit_button(t("btn_simulate", lang), type="primary")
    if not submitted:
        return

    location = SiteLocation(lat=lat, lng=lng)
    results = run(
        SimulationInput(
            array=PanelArrayConfig(panel_count=int(panel_count), panel_wattage=panel_wattage),
            orientation=SiteOrientation(orientation=orientation, tilt=tilt),
            location=location,
            electricity_price=price,
            installation_cost=cost or None,
        )
    )
    new_roof = RoofData(
        address=address,
        lat=location.lat,
        lng=location.lng,
        orientation=orientation,
        tilt=tilt,
        area=roof.area,
        obstacles=roof.obstacles,
    )
    new_panels = PanelsConfig(
        panel_count=int(panel_count),
        panel_wattage=panel_wattage,
        panel_positions=panels.panel_positions if int(panel_count) == panels.panel_count else (),
    )
    store.update_project(
        project.id,
        user_id,
        {
            "roof_data": new_roof.to_row(),
            "panels_config": new_panels.to_row(),
            "simulation_results": results.to_row(),
        },
    )
    if results.annual_production < 0:
        push_notice(
            st.session_state,
            "warning",
            t("notice_simulated", lang),
            "Orientation ou inclinaison très éloignée de l'optimum",
        )
    else:
        push_notice(st.session_state, "success", t("notice_simulated", lang))
    st.session_state.pop("sim_lat", None)
    st.session_state.pop("sim_lng", None)
    st.rerun()


def _project_form(store: SupabaseStore, user_id: str, lang: str) -> None:
    editing = st.session_state.view == "edit"
    current = store.get_project(st.session_state.selected_id, user_id) if editing else None
    st.header(current.name if current else "Nouveau projet")

    clients = store.list_clients(user_id)
    if not editing:
        term = st.text_input(t("label_search", lang), key="project_client_search")
        choices = filter_clients(clients, term)
    else:
        choices = [c for c in clients if c.id == current.client_id]
    by_id = {c.id: c for c in choices}
    ids = list(by_id)
    preselected = current.client_id if current else st.session_state.preselected_id

    with st.form("project_form"):
        name = st.text_input("Nom du projet", current.name if current else "")
        description = st.text_area("Description", current.description if current else "")
        client_id = st.selectbox(
            "Client",
            ids,
            index=ids.index(preselected) if preselected in ids else None,
            format_func=lambda cid: f"{by_id[cid].full_name} ({by_id[cid].city})",
            disabled=editing,
        )
        statuses = PROJECT_STATUSES if editing else PROJECT_STATUSES[:3]
        status = st.selectbox(
            t("label_status", lang),
            statuses,
            index=statuses.index(current.status) if current and current.status in statuses else 0,
            format_func=lambda s: status_label(s, lang),
        )
        production = savings = None
        if editing:
            c1, c2 = st.columns(2)
            production = c1.number_input(
                "Production annuelle estimée (kWh)", value=current.estimated_production, min_value=0.0
            )
            savings = c2.number_input(
                "Économies annuelles estimées (€)", value=current.estimated_savings, min_value=0.0
            )
        submitted = st.form_submit_button(t("btn_save", lang), type="primary")
    if st.button(t("btn_cancel", lang)):
        _go("projects", "detail" if editing else "list", st.session_state.selected_id)
    if not submitted:
        return

    form = {
        "name": name,
        "description": description,
        "client_id": client_id or "",
        "status": status,
        "estimated_production": production,
        "estimated_savings": savings,
    }
    errors = validate_project_form(form)
    if errors:
        _show_errors(errors)
        return
    fields = {"name": name.strip(), "description": description.strip(), "status": status}
    if editing:
        fields["estimated_production"] = production
        fields["estimated_savings"] = savings
        project = store.update_project(current.id, user_id, fields)
        push_notice(st.session_state, "success", t("notice_saved", lang))
    else:
        fields["client_id"] = client_id
        project = store.create_project(user_id, fields)
        push_notice(st.session_state, "success", t("notice_created", lang), project.name)
    _go("projects", "detail", project.id)


# --- Quotes ---


def _page_new_quote(store: SupabaseStore, user_id: str, lang: str) -> None:
    st.header(t("nav_new_quote", lang))
    projects = store.list_projects(user_id)
    term = st.text_input(t("label_search", lang), key="quote_project_search")
    choices = filter_projects_for_quote(projects, term)
    by_id = {p.id: p for p in choices}
    ids = list(by_id)
    preselected = st.session_state.preselected_id

    items_df = st.data_editor(
        pd.DataFrame([{"description": "", "quantity": 1.0, "unit_price": 0.0}]),
        num_rows="dynamic",
        key="quote_items",
        column_config={
            "description": st.column_config.TextColumn("Description"),
            "quantity": st.column_config.NumberColumn("Quantité", min_value=0.0),
            "unit_price": st.column_config.NumberColumn("Prix unitaire (€)", min_value=0.0, format="%.2f"),
        },
    )
    items = tuple(
        QuoteItem.from_row(row)
        for row in items_df.fillna({"quantity": 0.0, "unit_price": 0.0}).to_dict("records")
        if str(row.get("description") or "").strip()
    )
    if items:
        st.metric("Total", format_currency(quote_total(items)))

    with st.form("quote_form"):
        project_id = st.selectbox(
            "Projet",
            ids,
            index=ids.index(preselected) if preselected in ids else None,
            format_func=lambda pid: (
                f"{by_id[pid].name} — {by_id[pid].client.full_name}" if by_id[pid].client else by_id[pid].name
            ),
        )
        name = st.text_input("Nom du devis")
        description = st.text_area("Description")
        total_amount = st.number_input(
            "Montant total (€)", min_value=0.0, value=0.0, step=100.0, disabled=bool(items)
        )
        status = st.selectbox(
            t("label_status", lang), _NEW_QUOTE_STATUSES, format_func=lambda s: status_label(s, lang)
        )
        valid_until = st.date_input(
            "Valable jusqu'au", value=datetime.date.today() + datetime.timedelta(days=30)
        )
        submitted = st.form_submit_button(t("btn_save", lang), type="primary")
    if not submitted:
        return

    form = {
        "project_id": project_id or "",
        "name": name,
        "status": status,
        "total_amount": None if items else total_amount,
    }
    errors = validate_quote_form(form, items)
    if errors:
        _show_errors(errors)
        return
    fields = {
        "project_id": project_id,
        "name": name.strip(),
        "description": description.strip(),
        "status": status,
        "valid_until": valid_until.isoformat(),
        "total_amount": total_amount,
    }
    quote = store.create_quote(user_id, fields, items)
    push_notice(st.session_state, "success", t("notice_created", lang), quote.quote_number)
    _go("projects", "detail", project_id)


# --- Layout ---


def _sidebar(lang: str) -> None:
    session = st.session_state.session
    with st.sidebar:
        st.title("☀️ " + t("page_title", lang))
        st.caption(session.user.full_name or session.user.email)
        labels = {
            "dashboard": t("nav_dashboard", lang),
            "clients": t("nav_clients", lang),
            "projects": t("nav_projects", lang),
            "new_quote": t("nav_new_quote", lang),
        }
        for page in _PAGES:
            active = st.session_state.page == page
            if st.button(labels[page], key=f"nav_{page}", type="primary" if active else "secondary", use_container_width=True):
                _go(page)
        st.divider()
        if st.button(t("btn_sign_out", lang), use_container_width=True):
            try:
                sign_out(os.environ["SUPABASE_URL"], os.environ["SUPABASE_ANON_KEY"], session.access_token)
            except httpx.HTTPError as e:
                log.warning("sign-out failed: %s", e)
            finally:
                _drop_session()
            st.rerun()


def main() -> None:
    _init_state()
    lang = _detect_lang()
    st.set_page_config(page_title=t("page_title", lang), page_icon="☀️", layout="wide")
    _show_notices()

    if not _verify_session(lang):
        _page_login(lang)
        return

    _sidebar(lang)
    user_id = st.session_state.session.user.id
    store = _store()
    pages = {
        "dashboard": _page_dashboard,
        "clients": _page_clients,
        "projects": _page_projects,
        "new_quote": _page_new_quote,
    }
    try:
        pages[st.session_state.page](store, user_id, lang)
    except NotFoundError:
        st.error(t("error_not_found", lang))
        if st.button("←"):
            _go(st.session_state.page)
    except StoreError as e:
        st.error(t("error_load", lang).format(error=e))
    except httpx.HTTPError as e:
        log.error("page %s failed: %s", st.session_state.page, e)
        st.error(t("error_network", lang).format(error=e))


if __name__ == "__main__":
    main()
