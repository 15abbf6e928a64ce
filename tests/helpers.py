from app.models.employee import Employee


class FakeTimer:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.callback()


class FakeScheduler:
    """Records scheduled callbacks; tests fire them by hand."""

    def __init__(self):
        self.timers: list[FakeTimer] = []

    def schedule(self, delay, callback):
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]


def create_employee(
    db,
    name: str,
    email: str,
    position: str = "Developer",
    phone: str = "",
    department: str = "",
) -> Employee:
    e = Employee(name=name, email=email, position=position, phone=phone, department=department)
    db.add(e)
    db.commit()
    db.refresh(e)
    return e
