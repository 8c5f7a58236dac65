# Services package

from .kafka_service import CONSUME_HEADERS, KafkaHandler, KafkaService

__all__ = ["CONSUME_HEADERS", "KafkaHandler", "KafkaService"]
