import simpy

class MessageBroker:
    """
    Mediates communication between the dispatch controller and its observers.
    Implements a topic-based publish-subscribe model.
    """
    def __init__(self, env: simpy.Environment, verbose: bool = True):
        """
        Initialize the message broker

        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Print every published message
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}  # Store per subscribed topic
        self.broadcast_pipe = simpy.Store(self.env)

    def get_pipe(self, topic: str) -> simpy.Store:
        """
        Get or create a communication pipe (Store) for the specified topic

        Creating the pipe subscribes to the topic: only messages published
        after this call are delivered to it.
        """
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message):
        """
        Publish (put) a message to the specified topic

        Topics nobody subscribed to only reach the broadcast pipe.
        """
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        pipe = self.topics.get(topic)
        if pipe is not None:
            pipe.put(message)
        return self.broadcast_pipe.put({'topic': topic, 'message': message})

    def get(self, topic: str):
        """
        Wait to receive (get) a message from the specified topic
        """
        pipe = self.get_pipe(topic)
        return pipe.get()

    def get_broadcast_pipe(self) -> simpy.Store:
        """
        Returns the global broadcast pipe (every message on every topic)
        """
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        """
        Get current simulation time

        Lets actuators stamp messages without depending on the SimPy
        environment directly.
        """
        return self.env.now
