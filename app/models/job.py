from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from app.core.database import Base


class Job(Base):
    """
    Job model representing a job posting offered by a company.

    Defines the table shape for migrations and tests. Reads and writes go
    through the raw-SQL repository in app/crud/job.py.
    """
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity_max_one"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric, nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
