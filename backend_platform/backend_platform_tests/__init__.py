"""
Tests for the backend_platform auth_service package:

- FastAPI application factory and routes (`main.py`, `routes/auth.py`)
- Registration and login flow (`service.py`) and the credential store (`store.py`)
- Input validation (`validators.py`)
- Password hashing and token signing (`security.py`)
- Settings and logging setup (`config.py`, `utils/event_logger.py`)
"""
