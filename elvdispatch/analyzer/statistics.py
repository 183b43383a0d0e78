import re


class DispatchStatistics:
    """
    Receives all broker traffic as an independent "recorder" and
    counts what the elevators did.
    Keeps every message it sees in event_log as a list of dicts.
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.floors_travelled = {}  # elevator_name -> floors crossed
        self.door_openings = {}  # elevator_name -> [(time, floor)]
        self.hall_call_off_history = []  # [(time, floor, direction)]
        self.event_log = []  # List of events in standardized format

    def _add_event_log(self, topic, message):
        self.event_log.append({
            "time": self.env.now,
            "topic": topic,
            "data": dict(message)
        })

    def start_listening(self):
        """
        Main process to start intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()

            topic = data.get('topic', '')
            message = data.get('message', {})
            self._add_event_log(topic, message)

            move_match = re.match(r'elevator/(.*?)/move$', topic)
            if move_match:
                name = move_match.group(1)
                self.floors_travelled[name] = self.floors_travelled.get(name, 0) + 1
                continue

            door_match = re.match(r'elevator/(.*?)/door_events$', topic)
            if door_match and message.get('event_type') == 'OPEN':
                name = door_match.group(1)
                self.door_openings.setdefault(name, []).append((message.get('timestamp'), message.get('floor')))
                continue

            if re.match(r'hall_button/floor_\d+/call_off$', topic):
                self.hall_call_off_history.append(
                    (message.get('timestamp'), message.get('floor'), message.get('direction'))
                )

    def summary(self) -> dict:
        elevators = sorted(set(self.floors_travelled) | set(self.door_openings))
        return {
            "elevators": {
                name: {
                    "floors_travelled": self.floors_travelled.get(name, 0),
                    "door_openings": len(self.door_openings.get(name, [])),
                }
                for name in elevators
            },
            "hall_calls_served": len(self.hall_call_off_history),
            "events": len(self.event_log),
        }

    def print_summary(self):
        summary = self.summary()
        print("\n" + "=" * 60)
        print("   DISPATCH SUMMARY")
        print("=" * 60)
        for name, counts in summary["elevators"].items():
            print(f"{name}: {counts['floors_travelled']} floors travelled, "
                  f"{counts['door_openings']} door openings")
        print(f"Hall calls served: {summary['hall_calls_served']}")
        print(f"Events recorded: {summary['events']}")
        print("=" * 60)
