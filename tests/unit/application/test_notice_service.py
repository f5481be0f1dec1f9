# nosec B101


from application.services.notice_service import NoticeBoard


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_notice_visible_until_ttl_elapses():
    clock = FakeClock()
    board = NoticeBoard(default_ttl=5.0, clock=clock)

    board.show("Using fallback rates")
    clock.now += 4.9
    assert board.current().message == "Using fallback rates"

    clock.now += 0.1
    assert board.current() is None


def test_new_notice_replaces_previous():
    clock = FakeClock()
    board = NoticeBoard(clock=clock)

    board.show("first")
    board.show("second", ttl=1)

    assert board.current().message == "second"
    clock.now += 1
    assert board.current() is None


def test_zero_ttl_never_expires_until_dismissed():
    clock = FakeClock()
    board = NoticeBoard(clock=clock)

    board.show("sticky", ttl=0)
    clock.now += 10_000
    assert board.current().message == "sticky"

    board.dismiss()
    assert board.current() is None
