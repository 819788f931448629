import logging

class TriggerFilter(logging.Filter):
    def filter(self, record):
        # Records logged outside a sitemap run have no trigger attached
        if not hasattr(record, 'trigger'):
            record.trigger = '-'
        return True
