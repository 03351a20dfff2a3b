from __future__ import annotations

from dataclasses import dataclass

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.service import AuthService
from .borrows.mysql_borrow_repository import MySQLBorrowRepository
from .borrows.service import BorrowService
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .registry.mysql_registry_repository import MySQLRegistryRepository
from .registry.service import RegistryService
from .repairs.mysql_repair_repository import MySQLRepairRepository
from .repairs.service import RepairService
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.service import ReportService
from .reservations.mysql_reservation_repository import MySQLReservationRepository
from .reservations.service import ReservationService
from .tech4ed.mysql_tech4ed_repository import MySQLTech4edRepository
from .tech4ed.service import Tech4edService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    registry_service: RegistryService
    repair_service: RepairService
    borrow_service: BorrowService
    reservation_service: ReservationService
    tech4ed_service: Tech4edService
    report_service: ReportService


def build_container(
    *,
    db_config: dict,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(pool_size),
        pool_timeout=float(pool_timeout),
    )
    conn = DatabaseConnection.get_instance(config)

    auth_service = AuthService(MySQLAdminRepository(conn))

    return Container(
        auth_service=auth_service,
        registry_service=RegistryService(MySQLRegistryRepository(conn)),
        repair_service=RepairService(MySQLRepairRepository(conn), auth_service),
        borrow_service=BorrowService(MySQLBorrowRepository(conn), auth_service),
        reservation_service=ReservationService(MySQLReservationRepository(conn), auth_service),
        tech4ed_service=Tech4edService(MySQLTech4edRepository(conn), auth_service),
        report_service=ReportService(MySQLReportRepository(conn)),
    )
