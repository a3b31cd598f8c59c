from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seat_selector import config
from seat_selector.database import create_booking_store
from seat_selector.logger_config import logger
from seat_selector.routers import booking, layout, seats
from seat_selector.session import SeatingSession

# Create FastAPI app
app = FastAPI(
    title="Sugarland Theaters - Seat Selector",
    description="Seat selection, pricing and simulated booking for a theater seat map",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(seats.router)
app.include_router(booking.router)
app.include_router(layout.router)

# One seating session per application instance
app.state.session = SeatingSession(create_booking_store())
logger.info(f"Seat selector ready (booking store: {config.BOOKING_STORE_BACKEND})")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "Seat Selector",
        "version": "1.0.0"
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to Sugarland Theaters seat selection",
        "docs": "/docs",
        "health": "/health",
        "seats": "/seats"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "seat_selector.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG
    )
