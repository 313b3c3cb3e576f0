"""Starting the philosophers' threads."""

import threading


def _simulation(philosopher):
    """Routine run by each philosopher's thread."""
    return None


def start_dinner(table):
    """Start one thread per philosopher and return the started threads.

    Nothing is started when no meal limit was given or when only one
    philosopher is seated.
    """
    config = table.config
    if config.min_meals == -1 or config.num_philos == 1:
        return []
    threads = []
    for philosopher in table.philosophers:
        thread = threading.Thread(
            target=_simulation,
            args=(philosopher,),
            name=f"philosopher-{philosopher.id}",
        )
        philosopher.thread = thread
        thread.start()
        threads.append(thread)
    return threads