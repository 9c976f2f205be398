from stagehand.models.tenant import Tenant, SubscriptionPlan, SubscriptionStatus
from stagehand.models.user import User, UserRole
from stagehand.models.venue import Venue, VenueType
from stagehand.models.client import Client, ClientType
from stagehand.models.performer import Performer, PerformerType
from stagehand.models.event import Event, EventType, EventStatus
from stagehand.models.booking import Booking, BookingStatus
from stagehand.models.event_task import EventTask, TaskStatus, TaskPriority
