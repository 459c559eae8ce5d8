from sqlalchemy.orm import Session
from app.schemas.ai_schema import AIPersonaCreate
from app.schemas.service_schema import ServiceCreate
from app.services.ai_persona_crud import ai_persona_crud
from app.services.ai_setting_crud import ai_setting_crud
from app.services.service_crud import service_crud

SAMPLE_SERVICES = [
    {
        "name": "Express Facial",
        "description": "A quick cleanse, exfoliation and hydration treatment.",
        "duration": 15,
        "price": 20000,
        "buffer_before": "0",
        "buffer_after": "15",
    },
    {
        "name": "Shoulder & Neck Massage",
        "description": "Targeted relief for tension in the upper back, shoulders and neck.",
        "duration": 20,
        "price": 25000,
        "buffer_before": "15",
        "buffer_after": "0",
    },
    {
        "name": "30min Relaxation Massage",
        "description": "A calming full body massage with aromatic oils.",
        "duration": 30,
        "price": 35000,
        "buffer_before": "0",
        "buffer_after": "15",
    },
    {
        "name": "1hr Signature Treatment",
        "description": "Massage, facial and scalp treatment tailored to your needs.",
        "duration": 60,
        "price": 60000,
        "buffer_before": "15",
        "buffer_after": "15",
    },
    {
        "name": "2hrs Full Spa Experience",
        "description": "Two hours of massage, body scrub, facial and relaxation time.",
        "duration": 120,
        "price": 120000,
        "buffer_before": "15",
        "buffer_after": "30",
    },
    {
        "name": "Hot Stone Therapy",
        "description": "Heated basalt stones to ease deep muscle tension.",
        "duration": 45,
        "price": 25000,
        "buffer_before": "0",
        "buffer_after": "0",
    },
]

SAMPLE_PERSONAS = [
    {
        "name": "Customer Service",
        "description": "General inquiries and bookings",
        "system_prompt": "You are a helpful customer service assistant for a booking service. "
                         "Help answer questions about services and guide users through the booking process.",
        "icon": "robot",
        "icon_color": "blue",
    },
    {
        "name": "Booking Concierge",
        "description": "Premium experiences and scheduling",
        "system_prompt": "You are a concierge helping clients choose and schedule premium treatments. "
                         "Be informative, professional, and discreet.",
        "icon": "user-tie",
        "icon_color": "purple",
    },
    {
        "name": "Wellness Coach",
        "description": "Friendly chats about self-care",
        "system_prompt": "You are a friendly wellness coach. Be casual, warm, and engaging in conversation.",
        "icon": "heart",
        "icon_color": "pink",
    },
    {
        "name": "Aftercare Advisor",
        "description": "Advice after a treatment",
        "system_prompt": "You give clear, direct aftercare advice following spa treatments.",
        "icon": "star",
        "icon_color": "red",
    },
]

SAMPLE_SETTINGS = [
    ("ai_mode", False, "Whether AI mode is enabled"),
    ("training_mode", False, "Whether training mode is enabled"),
    (
        "training_settings",
        {
            "max_turns": 20,
            "message_delay_min": 1000,
            "message_delay_max": 3000,
            "active_personas": [1, 2],
        },
        "Settings for training mode",
    ),
    ("reminder_hours", {"first": 24, "second": 1}, "Hours before an appointment to send reminders"),
    ("max_advance_booking_days", 30, "How many days ahead clients may book"),
]


def seed_sample_data(db: Session) -> None:
    for service in SAMPLE_SERVICES:
        service_crud.create_service(db, ServiceCreate(**service))

    for persona in SAMPLE_PERSONAS:
        ai_persona_crud.create_persona(db, AIPersonaCreate(**persona))

    for key, value, description in SAMPLE_SETTINGS:
        ai_setting_crud.upsert_setting(db, key, value, description)
