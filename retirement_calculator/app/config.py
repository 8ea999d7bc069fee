"""Default settings; override with RETIREMENT_CALC_* environment variables."""


class Config:
    # local dev servers for the frontend (Vite and CRA)
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    PORT = 5000
    LOG_LEVEL = "INFO"
