import datetime
import json

class Logger:
    """
    Receives events from the normalization pipeline. Each event has a type
    and an optional JSON-serializable payload.
    """

    def log(self, event_type, data=None):
        raise NotImplementedError

    def log_grammar(self, event_type, grammar, **kwargs):
        data = grammar_summary(grammar)
        data.update(kwargs)
        self.log(event_type, data)

class NullLogger(Logger):

    def log(self, event_type, data=None):
        pass

class MemoryLogger(Logger):

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event_type, data=None):
        self.events.append(LogEvent(event_type, get_current_time(), data))

class FileLogger(Logger):

    def __init__(self, file, flush=False):
        super().__init__()
        self.file = file
        self.flush = flush

    def log(self, event_type, data=None):
        self.log_event(LogEvent(event_type, get_current_time(), data))

    def log_event(self, event):
        self.file.write(format_log_line(event))
        if self.flush:
            self.file.flush()

def grammar_summary(grammar):
    return {
        'nonterminals' : len(grammar.nonterminals),
        'terminals' : len(grammar.terminals),
        'rules' : len(grammar.rules),
        'epsilon_rules' : sum(1 for r in grammar.rules if r.is_epsilon),
        'unary_rules' : sum(1 for r in grammar.rules if r.is_unary)
    }

def format_log_line(event):
    fields = [event.type, str(event.timestamp.timestamp())]
    if event.data is not None:
        fields.append(json.dumps(
            event.data, separators=(',', ':'), sort_keys=True, ensure_ascii=False))
    return ' '.join(fields) + '\n'

def read_log_file(file):
    return map(parse_log_line, file)

class LogParseError(ValueError):
    pass

def parse_log_line(line):
    try:
        fields = line.rstrip('\n').split(' ', 2)
        try:
            event_type, timestamp_str = fields
        except ValueError:
            event_type, timestamp_str, data_str = fields
            data = json.loads(data_str)
        else:
            data = None
        timestamp = parse_timestamp(float(timestamp_str))
    except ValueError:
        raise LogParseError(f'cannot parse log line {line!r}')
    return LogEvent(event_type, timestamp, data)

class LogEvent:

    def __init__(self, type, timestamp, data):
        self.type = type
        self.timestamp = timestamp
        self.data = data

    def __repr__(self):
        return 'LogEvent(%r, %r, %r)' % (self.type, self.timestamp, self.data)

def get_current_time():
    return datetime.datetime.now(datetime.timezone.utc)

def parse_timestamp(timestamp):
    return datetime.datetime.fromtimestamp(timestamp, datetime.timezone.utc)
