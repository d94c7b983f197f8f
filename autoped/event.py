import logging
logger = logging.getLogger(__name__)


class CollectionExists(Exception): pass


class EventType:
    # Enum-style values
    kUNKNOWN = 0
    kBORE    = 1
    kDE      = 2
    kEORE    = 3

    _id_to_name = {
        0: "kUNKNOWN",
        1: "kBORE",
        2: "kDE",
        3: "kEORE",
    }

    _name_to_id = {v: k for k, v in _id_to_name.items()}

    @classmethod
    def name(cls, event_type):
        return cls._id_to_name.get(event_type, f"Unknown({event_type})")

    @classmethod
    def value(cls, name):
        return cls._name_to_id.get(name)

    @classmethod
    def isEndOfRun(cls, event_type):
        return event_type == cls.kEORE

    @classmethod
    def isKnown(cls, event_type):
        return event_type in (cls.kBORE, cls.kDE, cls.kEORE)


class Event:
    """
    Event holds named collections attached by processors
    """

    def __init__(self, event_number=0, run_number=0, event_type=EventType.kDE):
        self.event_number = event_number
        self.run_number = run_number
        self.event_type = event_type
        self._collections = {}

    def add_collection(self, coll, name):
        if name in self._collections:
            raise CollectionExists('collection "%s" already exists in event %d run %d'%\
                                   (name, self.event_number, self.run_number))
        self._collections[name] = coll

    def get_collection(self, name):
        return self._collections[name]

    def collection_names(self):
        return list(self._collections.keys())

    def __repr__(self):
        return 'Event(event_number=%d, run_number=%d, event_type=%s)' %\
               (self.event_number, self.run_number, EventType.name(self.event_type))
