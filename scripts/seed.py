#!/usr/bin/env python3
# =============================================================================
# scripts/seed.py - Database Seed
# =============================================================================
# Populates the database with example data:
# - 6 waste types
# - 2 users (a citizen and a municipal operator)
# - 3 collection points with address, schedule and accepted waste types
# - 2 reports on the street bins
#
# Running it twice inserts everything twice (and fails on the unique emails).
#
# Usage:
#   poetry run python scripts/seed.py
#
# Prerequisites:
#   - Schema from db/schema.sql applied to the Supabase project
#   - Environment variables must be set (.env file)
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.models.report import ReportStatus, ReportType
from core.models.user import OAuthProvider, UserRole
from lib.security import hash_password
from lib.supabase_client import SupabaseClient

SEED_PASSWORD = "Password123!"
SEED_BCRYPT_ROUNDS = 10

WASTE_TYPES = [
    {
        "name": "Plastica",
        "description": "Contenitori in plastica, bottiglie, flaconi",
        "color": "#FFD700",
        "icon_name": "recycle",
        "disposal_info": "Svuotare e sciacquare i contenitori. Appiattire le bottiglie per ridurre il volume. Non inserire plastica sporca o con residui di cibo.",
        "examples": "Bottiglie di acqua e bibite, flaconi di shampoo e detersivi, vaschette per alimenti, sacchetti puliti, imballaggi in plastica",
    },
    {
        "name": "Carta e Cartone",
        "description": "Giornali, riviste, scatole di cartone",
        "color": "#0066CC",
        "icon_name": "newspaper",
        "disposal_info": "Appiattire le scatole per ottimizzare lo spazio. Non inserire carta sporca, oleata o plastificata. Rimuovere nastri adesivi e parti in plastica o metallo.",
        "examples": "Giornali, riviste, libri, quaderni, scatole di cartone, cartoni della pizza (se puliti), sacchetti di carta",
    },
    {
        "name": "Vetro",
        "description": "Bottiglie e contenitori in vetro",
        "color": "#228B22",
        "icon_name": "wine-bottle",
        "disposal_info": "Svuotare e sciacquare i contenitori. Non inserire ceramica, porcellana, specchi, lampadine o vetri di finestre.",
        "examples": "Bottiglie di vino, birra e acqua, vasetti di marmellata e conserve, contenitori in vetro per alimenti",
    },
    {
        "name": "Organico",
        "description": "Scarti di cibo e rifiuti biodegradabili",
        "color": "#8B4513",
        "icon_name": "leaf",
        "disposal_info": "Utilizzare sacchetti biodegradabili e compostabili. Non inserire liquidi in grande quantità, oli esausti o ossa di grandi dimensioni.",
        "examples": "Avanzi di cibo, bucce di frutta e verdura, fondi di caffè, filtri di tè, tovaglioli di carta sporchi, piccole ossa",
    },
    {
        "name": "Indifferenziato",
        "description": "Rifiuti non riciclabili negli altri contenitori",
        "color": "#808080",
        "icon_name": "trash",
        "disposal_info": "Conferire solo ciò che non può essere riciclato negli altri contenitori. Ridurre al minimo questa frazione differenziando correttamente.",
        "examples": "Pannolini e assorbenti, carta sporca o plastificata, ceramica e porcellana, giocattoli rotti, oggetti in gomma",
    },
    {
        "name": "Metalli",
        "description": "Lattine, barattoli, piccoli oggetti metallici",
        "color": "#C0C0C0",
        "icon_name": "can-food",
        "disposal_info": "Svuotare e sciacquare i contenitori. Separare eventuali parti non metalliche. Piccoli oggetti metallici vanno qui.",
        "examples": "Lattine di alluminio, barattoli metallici, coperchi, pentole e padelle, piccoli elettrodomestici (dove previsto)",
    },
]

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def weekly(open_days: set[str], opening_time: str, closing_time: str, notes: str) -> dict:
    schedule = {day: day in open_days for day in WEEKDAYS}
    schedule.update(opening_time=opening_time, closing_time=closing_time, notes=notes)
    return schedule


def create_collection_point(
    operator_id: int,
    point: dict,
    address: dict,
    schedule: dict,
    waste_type_ids: list[int],
) -> dict:
    """Insert a point with its address, schedule and waste-type links."""
    row = SupabaseClient.insert_row("collection_points", {"operator_id": operator_id, **point})
    SupabaseClient.insert_row("addresses", {"collection_point_id": row["id"], **address})
    SupabaseClient.insert_row("schedules", {"collection_point_id": row["id"], **schedule})
    SupabaseClient.insert_rows(
        "collection_point_waste_types",
        [{"collection_point_id": row["id"], "waste_type_id": wt_id} for wt_id in waste_type_ids],
    )
    return row


def seed() -> None:
    """Insert the example data set."""
    print("Starting database seed...")

    # -------------------------------------------------------------------------
    # Waste types
    # -------------------------------------------------------------------------
    print("Creating waste types...")
    waste_types = SupabaseClient.insert_rows("waste_types", WASTE_TYPES)
    ids_by_name = {wt["name"]: wt["id"] for wt in waste_types}
    all_ids = [ids_by_name[wt["name"]] for wt in WASTE_TYPES]
    print(f"  Created {len(waste_types)} waste types")

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------
    print("Creating users...")
    hashed_password = hash_password(SEED_PASSWORD, rounds=SEED_BCRYPT_ROUNDS)

    citizen = SupabaseClient.insert_row(
        "users",
        {
            "email": "mario.rossi@example.com",
            "name": "Mario",
            "surname": "Rossi",
            "cellphone": "+39 333 1234567",
            "role": UserRole.USER.value,
            "password": hashed_password,
            "oauth_provider": OAuthProvider.APP.value,
        },
    )

    operator_user = SupabaseClient.insert_row(
        "users",
        {
            "email": "comune.roma@example.com",
            "name": "Comune",
            "surname": "di Roma",
            "role": UserRole.OPERATOR.value,
            "password": hashed_password,
            "oauth_provider": OAuthProvider.APP.value,
        },
    )
    SupabaseClient.insert_row(
        "operators",
        {
            "user_id": operator_user["id"],
            "organization_name": "Comune di Roma - Ufficio Ambiente",
            "vat_number": "IT12345678901",
            "telephone": "+39 06 67101",
            "website": "https://www.comune.roma.it",
        },
    )
    print("  Created users")

    # -------------------------------------------------------------------------
    # Collection points
    # -------------------------------------------------------------------------
    print("Creating collection points...")
    operator_id = operator_user["id"]

    create_collection_point(
        operator_id,
        {
            "name": "Isola Ecologica Centro",
            "description": "Centro di raccolta principale in zona centro. Accetta tutti i tipi di rifiuti differenziati. Personale disponibile per assistenza.",
            "is_active": True,
            "accessibility": "Accessibile a persone con disabilità, ampio parcheggio disponibile",
            "capacity": "Grande - oltre 50 utenti/ora",
        },
        {
            "street": "Via Roma", "number": "123", "city": "Roma", "zip": "00100",
            "country": "Italia", "latitude": 41.9028, "longitude": 12.4964,
        },
        weekly(set(WEEKDAYS) - {"sunday"}, "08:00", "20:00", "Chiuso la domenica e nei giorni festivi"),
        all_ids,
    )

    street_bins = create_collection_point(
        operator_id,
        {
            "name": "Cassonetti Via Milano",
            "description": "Postazione cassonetti stradali per raccolta differenziata. Svuotamento regolare 3 volte a settimana.",
            "is_active": True,
            "capacity": "Media - 20-50 utenti/ora",
        },
        {
            "street": "Via Milano", "number": "45", "city": "Roma", "zip": "00184",
            "country": "Italia", "latitude": 41.8919, "longitude": 12.5113,
        },
        {"is_always_open": True, "notes": "Cassonetti stradali accessibili 24/7"},
        [ids_by_name[name] for name in ("Plastica", "Carta e Cartone", "Vetro", "Indifferenziato")],
    )

    create_collection_point(
        operator_id,
        {
            "name": "Centro Raccolta Quartiere Nord",
            "description": "Centro di raccolta di quartiere con area dedicata ai rifiuti ingombranti e RAEE.",
            "is_active": True,
            "accessibility": "Parcheggio disponibile, rampa di accesso",
            "capacity": "Media - 30 utenti/ora",
        },
        {
            "street": "Via Tiburtina", "number": "200", "city": "Roma", "zip": "00185",
            "country": "Italia", "latitude": 41.9109, "longitude": 12.5268,
        },
        weekly({"monday", "wednesday", "friday", "saturday"}, "09:00", "18:00",
               "Aperto lunedì, mercoledì, venerdì e sabato"),
        all_ids,
    )
    print("  Created 3 collection points")

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------
    print("Creating example reports...")
    SupabaseClient.insert_rows(
        "reports",
        [
            {
                "user_id": citizen["id"],
                "collection_point_id": street_bins["id"],
                "type": ReportType.FULL_BIN.value,
                "description": "Il cassonetto della plastica è completamente pieno e trabocca. Alcuni rifiuti sono caduti a terra.",
                "status": ReportStatus.PENDING.value,
            },
            {
                "user_id": citizen["id"],
                "collection_point_id": street_bins["id"],
                "type": ReportType.NEEDS_CLEANING.value,
                "description": "Area intorno ai cassonetti sporca, necessita pulizia",
                "status": ReportStatus.IN_PROGRESS.value,
                "resolved_by": operator_id,
            },
        ],
    )
    print("  Created example reports")

    print("Database seed completed successfully!")


def main() -> int:
    try:
        seed()
    except Exception as e:
        print(f"Error during seed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
