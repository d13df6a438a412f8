# synapse_pay_client/app/__init__.py
import logging

logger = logging.getLogger(__name__)
