"""Demo records loaded into a fresh studio."""
from __future__ import annotations

from .models import Appointment, Client, PortfolioPiece

SEED_APPOINTMENTS: tuple[Appointment, ...] = (
    Appointment(
        id="1",
        client_name="Alex Johnson",
        date="2024-01-15",
        time="14:00",
        service="Large Sleeve Tattoo",
        status="scheduled",
        price=800,
        notes="Dragon design on left arm",
    ),
    Appointment(
        id="2",
        client_name="Sarah Williams",
        date="2024-01-16",
        time="10:00",
        service="Small Wrist Tattoo",
        status="completed",
        price=150,
        notes="Minimalist rose design",
    ),
)

SEED_CLIENTS: tuple[Client, ...] = (
    Client(
        id="1",
        name="Alex Johnson",
        email="alex@email.com",
        phone="(555) 123-4567",
        total_sessions=3,
        total_spent=1200,
        last_visit="2024-01-10",
    ),
    Client(
        id="2",
        name="Sarah Williams",
        email="sarah@email.com",
        phone="(555) 987-6543",
        total_sessions=1,
        total_spent=150,
        last_visit="2024-01-05",
    ),
)

SEED_PORTFOLIO: tuple[PortfolioPiece, ...] = (
    PortfolioPiece(
        id="1",
        title="Dragon Sleeve",
        style="Traditional Japanese",
        size="Large",
        description="Full arm dragon with cherry blossoms",
        image_url="https://images.unsplash.com/photo-1611501275019-9b5cda994e8d?w=400",
    ),
    PortfolioPiece(
        id="2",
        title="Rose Minimalist",
        style="Minimalist",
        size="Small",
        description="Simple black line rose design",
        image_url="https://images.unsplash.com/photo-1565058379802-bbe93b2f703a?w=400",
    ),
    PortfolioPiece(
        id="3",
        title="Geometric Wolf",
        style="Geometric",
        size="Medium",
        description="Abstract geometric wolf head",
        image_url="https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=400",
    ),
)
