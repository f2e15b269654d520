from taskflow.services.motivation import (
    FALLBACK_MESSAGE,
    MESSAGES,
    MotivationService,
    get_motivation_service,
)


def test_seven_fixed_messages():
    assert len(MESSAGES) == 7
    assert len(set(MESSAGES)) == 7


def test_random_message_comes_from_fixed_set():
    service = MotivationService()
    for _ in range(50):
        assert service.random_message() in MESSAGES


def test_empty_list_returns_fallback():
    assert MotivationService(messages=[]).random_message() == FALLBACK_MESSAGE


def test_dependency_returns_shared_instance():
    assert get_motivation_service() is get_motivation_service()
