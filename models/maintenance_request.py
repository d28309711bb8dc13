# models/maintenance_request.py
from sqlalchemy import JSON, Column, Numeric, String, Text
from .base import Base


class MaintenanceRequest(Base):
     """
     MaintenanceRequest model - repair or upkeep work raised for a property.
     Table: maintenance_requests
     """

     id = Column(String(36), primary_key=True)
     property_id = Column(String(36), nullable=False, index=True)
     description = Column(Text, nullable=False)
     status = Column(String(50), nullable=False, default="pending")
     priority = Column(String(50), nullable=False)
     created_at = Column(String(32), nullable=False)

     # Assignment and costs
     assigned_to = Column(String(255), nullable=False, default="")
     estimated_cost = Column(Numeric(12, 2), nullable=False, default=0)
     actual_cost = Column(Numeric(12, 2), nullable=False, default=0)
     completion_date = Column(String(32), nullable=False, default="")
     tenant_feedback = Column(Text, nullable=False, default="")

     images = Column(JSON, nullable=False, default=list)
     work_orders = Column(JSON, nullable=False, default=list)  # order_date, contractor, status, notes

     def __repr__(self):
          return f"<MaintenanceRequest(id={self.id}, status='{self.status}', priority='{self.priority}')>"
