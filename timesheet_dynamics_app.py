#!/usr/bin/env python3
"""
Workforce → Dynamics timeføring

Converts a weekly Workforce timesheet export into a Dynamics import file:
- Reads date, start time and end time from fixed cell positions
- Normalizes serial numbers, Norwegian date strings and clock strings
- Filters entries to one ISO week (Monday start)
- Sums worked hours per weekday and adds a fixed lunch line

Key details:
- Blank rows never stop the scan, only fully empty rows are skipped
- Unparseable cells become None and contribute zero hours
- Overnight shifts (end before start) wrap around midnight
- Dynamics constants and sheet layout can be overridden in config.yaml
"""

import calendar
import csv
import io
import logging
import math
import re
import warnings
from dataclasses import dataclass, field, asdict
from datetime import date, datetime, time, timedelta
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd
import xlrd
import yaml
from openpyxl import load_workbook
from openpyxl.utils.datetime import from_excel

APP_VERSION = "1.4.0"

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent / "config.yaml"

MINUTES_PER_DAY = 24 * 60

# Largest serial Excel accepts (9999-12-31)
MAX_EXCEL_SERIAL = 2958465

HOURS_COLS = [
    "HOURS",
    "Hours2_",
    "Hours3_",
    "Hours4_",
    "Hours5_",
    "Hours6_",
    "Hours7_",
]
COMMENT_COLS = [
    "EXTERNALCOMMENTS",
    "ExternalComments2_",
    "ExternalComments3_",
    "ExternalComments4_",
    "ExternalComments5_",
    "ExternalComments6_",
    "ExternalComments7_",
]
DYNAMICS_HEADERS = [
    "LineNum",
    "ProjectDataAreaId",
    "ProjId",
    "ACTIVITYNUMBER",
    *HOURS_COLS,
    *COMMENT_COLS,
]

DAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class WorkforceReadError(ValueError):
    """Raised when an uploaded file cannot be read as a spreadsheet at all"""


@dataclass
class DynamicsSettings:
    """Constant fields written to the two Dynamics rows"""
    project_data_area_id: str = "110"
    project_id: str = "11011127"
    work_line: str = "1.0000000000000000"
    lunch_line: str = "2.0000000000000000"
    work_activity: str = "A110015929"
    lunch_activity: str = "A110015932"
    work_comment: str = "Development"
    lunch_comment: str = "Lunsj"
    lunch_hours: float = 0.5


@dataclass
class WorkforceLayout:
    """Fixed cell positions in the Workforce export (0-based)"""
    start_row: int = 12  # row 13 in Excel
    date_col: int = 8    # I: Arbeidsdato
    start_col: int = 13  # N: Inntid
    end_col: int = 19    # T: Ut-tid


@dataclass
class Config:
    """Configuration for the timesheet converter"""
    dynamics: DynamicsSettings = field(default_factory=DynamicsSettings)
    layout: WorkforceLayout = field(default_factory=WorkforceLayout)


def _apply_section(target, values: Optional[Dict], section: str):
    """Copy known keys from a YAML section onto a settings dataclass"""
    if not values:
        return target
    if not isinstance(values, dict):
        logger.warning(f"Ignoring config section '{section}': expected a mapping")
        return target
    for key, value in values.items():
        if not hasattr(target, key):
            logger.warning(f"Unknown config key '{section}.{key}' ignored")
            continue
        default = getattr(target, key)
        try:
            setattr(target, key, type(default)(value))
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid value for '{section}.{key}': {value!r} ({e})")
    return target


def load_config(config_path: Path = CONFIG_PATH) -> Config:
    """Load configuration from config.yaml, falling back to built-in defaults"""
    config = Config()
    if not config_path.exists():
        return config
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load config from {config_path}: {e}")
        return config
    if not isinstance(data, dict):
        logger.warning(f"Could not load config from {config_path}: not a mapping")
        return config

    _apply_section(config.dynamics, data.get("dynamics"), "dynamics")
    _apply_section(config.layout, data.get("layout"), "layout")
    return config


def save_config(config: Config, config_path: Path = CONFIG_PATH):
    """Save settings to config.yaml, preserving other config sections"""
    data = {}
    try:
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read existing config: {e}")
    if not isinstance(data, dict):
        data = {}

    data["dynamics"] = asdict(config.dynamics)
    data["layout"] = asdict(config.layout)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    logger.info(f"Saved settings to {config_path}")


@dataclass(frozen=True)
class ParsedRow:
    """One time entry with date and times already normalized"""
    date: Optional[date]
    start_time_minutes: Optional[int]
    end_time_minutes: Optional[int]


@dataclass(frozen=True)
class FilteredRow:
    """A parsed row that fell inside the selected week"""
    row: ParsedRow
    date: date


@dataclass(frozen=True)
class WeekInfo:
    week_num: int
    year: int


@dataclass(frozen=True)
class CurrentWeekCheck:
    has_current_week: bool
    warning_message: Optional[str]


@dataclass
class ReadResult:
    rows: List[ParsedRow]
    file_name: str
    sheet_name: str


class CellNormalizer:
    """Convert raw spreadsheet cells into dates and minutes since midnight"""

    # Norwegian DD.MM.YY or DD.MM.YYYY
    DOTTED_DATE_PATTERN = re.compile(r"^\s*(\d{1,2})\.(\d{1,2})\.(\d{2}|\d{4})\s*$")
    # YYYY-MM-DD with optional time part; keeps "today"/"now" away from pandas
    ISO_DATE_PATTERN = re.compile(r"^\s*\d{4}-\d{1,2}-\d{1,2}(?:[T ].*)?\s*$")
    # HH:MM or HH.MM
    CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2})[.:](\d{2})\s*$")
    # Bare hour, implied :00
    HOUR_PATTERN = re.compile(r"^\s*(\d{1,2})\s*$")

    @staticmethod
    def is_empty(value: Any) -> bool:
        """True for None, empty string, NaN and NaT"""
        if value is None or value is pd.NaT:
            return True
        if isinstance(value, str):
            return value == ""
        if isinstance(value, float):
            return math.isnan(value)
        return False

    @staticmethod
    def _is_number(value: Any) -> bool:
        return pd.api.types.is_number(value) and not pd.api.types.is_bool(value)

    @classmethod
    def parse_date(cls, value: Any) -> Optional[date]:
        """
        Parse a date cell.

        Handles native dates, Excel serial day counts, Norwegian dotted
        dates with strict day/month validation, and ISO date strings.
        Returns None instead of raising.
        """
        if cls.is_empty(value):
            return None

        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, time) or pd.api.types.is_bool(value):
            return None

        if cls._is_number(value):
            serial = float(value)
            if not math.isfinite(serial) or serial < 0 or serial > MAX_EXCEL_SERIAL:
                return None
            try:
                converted = from_excel(serial)
            except (OverflowError, ValueError):
                return None
            # Serials below 1 decode to a bare time of day
            if not isinstance(converted, datetime):
                return None
            return converted.date()

        if not isinstance(value, str):
            return None

        m = cls.DOTTED_DATE_PATTERN.match(value)
        if m:
            day, month, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
            if len(m.group(3)) == 2:
                year += 2000
            # Reject overflow such as 32.01 instead of rolling into February
            if year < 1 or not 1 <= month <= 12:
                return None
            if not 1 <= day <= calendar.monthrange(year, month)[1]:
                return None
            return date(year, month, day)

        if not cls.ISO_DATE_PATTERN.match(value):
            return None

        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            try:
                parsed = pd.to_datetime(value.strip(), errors="coerce")
            except (TypeError, ValueError, OverflowError):
                return None
        if pd.isna(parsed):
            return None
        return parsed.date()

    @classmethod
    def parse_time(cls, value: Any) -> Optional[int]:
        """
        Parse a time cell to minutes since midnight (0-1439).

        Accepts native times, Excel day fractions, "HH:MM", "HH.MM" (also
        with a decimal comma) and a bare hour.
        """
        if cls.is_empty(value):
            return None

        if isinstance(value, (datetime, time)):
            return value.hour * 60 + value.minute
        if pd.api.types.is_bool(value):
            return None

        if cls._is_number(value):
            fraction = float(value)
            if math.isfinite(fraction) and 0 <= fraction <= MAX_EXCEL_SERIAL:
                try:
                    decoded = from_excel(fraction)
                    return decoded.hour * 60 + decoded.minute
                except (OverflowError, ValueError):
                    pass
            if 0 <= fraction <= 1:
                return min(round(fraction * MINUTES_PER_DAY), MINUTES_PER_DAY - 1)
            return None

        if not isinstance(value, str):
            return None
        raw = value.strip()
        if not raw:
            return None
        normalized = raw.replace(",", ".", 1)

        m = cls.CLOCK_PATTERN.match(normalized)
        if m:
            hours, minutes = int(m.group(1)), int(m.group(2))
        else:
            m = cls.HOUR_PATTERN.match(normalized)
            if not m:
                return None
            hours, minutes = int(m.group(1)), 0

        if not 0 <= hours <= 23:
            return None
        if not 0 <= minutes <= 59:
            return None
        return hours * 60 + minutes

    @staticmethod
    def calculate_hours(start_minutes: Optional[int], end_minutes: Optional[int]) -> float:
        """Hours between two clock times; an earlier end time means the shift crossed midnight"""
        if start_minutes is None or end_minutes is None:
            return 0
        diff = (end_minutes - start_minutes) % MINUTES_PER_DAY
        return diff / 60


class SheetGrid:
    """Read-only cell access over the first worksheet of an upload"""

    def __init__(self, frame: pd.DataFrame, sheet_name: str = ""):
        self.frame = frame
        self.sheet_name = sheet_name

    @property
    def max_row(self) -> int:
        """Index of the last occupied row, -1 for an empty sheet"""
        return len(self.frame.index) - 1

    def cell(self, row: int, col: int) -> Any:
        if row < 0 or col < 0:
            return None
        if row >= len(self.frame.index) or col >= len(self.frame.columns):
            return None
        value = self.frame.iat[row, col]
        return None if CellNormalizer.is_empty(value) else value


class WorkforceReader:
    """Read Workforce exports (xlsx, xls, csv) into parsed rows"""

    EXCEL_SUFFIXES = {".xlsx", ".xlsm"}

    def __init__(self, config: Config):
        self.config = config

    @staticmethod
    def _rows_to_frame(rows: List[Sequence[Any]]) -> pd.DataFrame:
        # Ragged rows are padded with None so positions stay fixed
        return pd.DataFrame([list(r) for r in rows], dtype=object)

    def _load_xlsx(self, data: bytes) -> SheetGrid:
        wb = load_workbook(io.BytesIO(data), data_only=True)
        try:
            ws = wb.worksheets[0]
            rows = list(ws.iter_rows(min_row=1, min_col=1, values_only=True))
            return SheetGrid(self._rows_to_frame(rows), ws.title)
        finally:
            wb.close()

    def _load_xls(self, data: bytes) -> SheetGrid:
        book = xlrd.open_workbook(file_contents=data)
        sheet = book.sheet_by_index(0)
        # xlrd hands dates back as serial floats
        rows = [sheet.row_values(r) for r in range(sheet.nrows)]
        return SheetGrid(self._rows_to_frame(rows), sheet.name)

    def _load_csv(self, data: bytes) -> SheetGrid:
        text = data.decode("utf-8-sig")
        rows = list(csv.reader(io.StringIO(text)))
        return SheetGrid(self._rows_to_frame(rows), "CSV")

    def load_grid(self, data: bytes, file_name: str) -> SheetGrid:
        """Decode raw file bytes into a cell grid; codec errors propagate"""
        suffix = Path(file_name).suffix.lower()
        if suffix in self.EXCEL_SUFFIXES:
            return self._load_xlsx(data)
        if suffix == ".xls":
            return self._load_xls(data)
        if suffix == ".csv":
            return self._load_csv(data)
        raise ValueError(f"Unsupported file type: {suffix or file_name}")

    def extract_rows(self, grid: SheetGrid) -> List[ParsedRow]:
        """Walk every row from the fixed start row to the last occupied row"""
        layout = self.config.layout
        rows = []
        skipped = 0

        for r in range(layout.start_row, grid.max_row + 1):
            d_val = grid.cell(r, layout.date_col)
            s_val = grid.cell(r, layout.start_col)
            e_val = grid.cell(r, layout.end_col)

            if d_val is None and s_val is None and e_val is None:
                skipped += 1
                continue

            parsed = ParsedRow(
                date=CellNormalizer.parse_date(d_val),
                start_time_minutes=CellNormalizer.parse_time(s_val),
                end_time_minutes=CellNormalizer.parse_time(e_val),
            )
            if parsed.date is None or parsed.start_time_minutes is None or parsed.end_time_minutes is None:
                logger.debug(f"  Row {r + 1}: partial entry {d_val!r} {s_val!r} {e_val!r} -> {parsed}")
            rows.append(parsed)

        logger.debug(f"Skipped {skipped} empty rows")
        return rows

    def read_file(self, data: bytes, file_name: str) -> ReadResult:
        """Read an uploaded file into parsed rows"""
        try:
            grid = self.load_grid(data, file_name)
        except Exception as e:
            raise WorkforceReadError(f"Could not read {file_name}: {e}") from e

        rows = self.extract_rows(grid)
        logger.info(f"Read {len(rows)} entries from {file_name} (sheet '{grid.sheet_name}')")
        return ReadResult(rows=rows, file_name=file_name, sheet_name=grid.sheet_name)


DateLike = Union[str, date, None]


class WeekHelper:
    """ISO week operations: Monday snapping, week numbers, filtering"""

    @staticmethod
    def to_date(value: Any) -> Optional[date]:
        """Parse an ISO date string or pass through a date (time part dropped)"""
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            return None
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None

    @classmethod
    def monday_of(cls, d: date) -> date:
        return d - timedelta(days=d.weekday())

    @classmethod
    def set_week_start_from_date(cls, value: DateLike) -> Optional[str]:
        """Snap any date to the Monday on or before it"""
        d = cls.to_date(value)
        if d is None:
            return None
        return cls.monday_of(d).isoformat()

    @classmethod
    def get_week_info(cls, value: DateLike) -> Optional[WeekInfo]:
        d = cls.to_date(value)
        if d is None:
            return None
        iso = d.isocalendar()
        return WeekInfo(week_num=iso[1], year=iso[0])

    @classmethod
    def get_current_week_monday(cls, today: Optional[date] = None) -> str:
        return cls.monday_of(today or date.today()).isoformat()

    @classmethod
    def is_date_in_week(cls, d: date, week_start_iso: DateLike) -> bool:
        """Half-open window [week_start, week_start + 7 days)"""
        start = cls.to_date(week_start_iso)
        d = cls.to_date(d)
        if start is None or d is None:
            return False
        end = start + timedelta(days=7)
        return d == start or start < d < end

    @classmethod
    def filter_rows_to_week(cls, rows: List[ParsedRow], week_start_iso: DateLike) -> List[FilteredRow]:
        """Keep rows dated inside the week; rows without a date are dropped"""
        if not week_start_iso:
            return []
        start = cls.to_date(week_start_iso)
        if start is None:
            logger.warning(f"Invalid week start: {week_start_iso!r}")
            return []

        filtered = []
        for r in rows:
            d = cls.to_date(r.date)
            if d is None:
                continue
            if cls.is_date_in_week(d, start):
                filtered.append(FilteredRow(row=r, date=d))

        logger.info(f"{len(filtered)} of {len(rows)} entries in week starting {start.isoformat()}")
        return filtered

    @classmethod
    def get_valid_dates(cls, rows: List[ParsedRow]) -> List[date]:
        return [d for d in (cls.to_date(r.date) for r in rows) if d is not None]

    @classmethod
    def check_current_week_in_file(cls, rows: List[ParsedRow], today: Optional[date] = None) -> CurrentWeekCheck:
        """
        Check whether today's ISO week is present among the row dates.

        Informational only: an empty file gives no warning, a file without
        the current week gives a warning naming the week.
        """
        current_monday = cls.get_current_week_monday(today)
        dates = cls.get_valid_dates(rows)

        if not dates:
            return CurrentWeekCheck(has_current_week=False, warning_message=None)

        if any(cls.is_date_in_week(d, current_monday) for d in dates):
            return CurrentWeekCheck(has_current_week=True, warning_message=None)

        info = cls.get_week_info(current_monday)
        warning = (
            f"⚠️ Warning: The current week ({info.year}-W{info.week_num:02d}) is not present "
            f"in the uploaded file. You may have chosen the wrong file."
        )
        return CurrentWeekCheck(has_current_week=False, warning_message=warning)

    @classmethod
    def pick_initial_week(cls, rows: List[ParsedRow], today: Optional[date] = None) -> Optional[str]:
        """Current week if present in the file, otherwise the week of the earliest date"""
        dates = cls.get_valid_dates(rows)
        if not dates:
            return None
        if cls.check_current_week_in_file(rows, today).has_current_week:
            return cls.get_current_week_monday(today)
        return cls.set_week_start_from_date(min(dates))


class DynamicsTransformer:
    """Aggregate a week of entries into the two Dynamics import rows"""

    def __init__(self, settings: DynamicsSettings):
        self.settings = settings

    @staticmethod
    def normalize_hours(hours: float) -> float:
        """Round half-up to 2 decimals"""
        return float(Decimal(str(hours)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    def totals_by_day(self, rows: List[FilteredRow], week_start: date) -> List[float]:
        totals = [0.0] * 7
        for item in rows:
            day_index = max(0, min(6, (item.date - week_start).days))
            hours = CellNormalizer.calculate_hours(
                item.row.start_time_minutes, item.row.end_time_minutes
            )
            if math.isfinite(hours) and hours > 0:
                totals[day_index] += hours
            else:
                logger.debug(f"  {item.date}: no hours counted for {item.row}")
        return [self.normalize_hours(t) if t > 0 else 0 for t in totals]

    def _empty_row(self, line_num: str, activity: str) -> Dict[str, Any]:
        row = {
            "LineNum": line_num,
            "ProjectDataAreaId": self.settings.project_data_area_id,
            "ProjId": self.settings.project_id,
            "ACTIVITYNUMBER": activity,
        }
        # Grouped order: all hours columns, then all comment columns
        for col in HOURS_COLS:
            row[col] = ""
        for col in COMMENT_COLS:
            row[col] = ""
        return row

    def transform_to_dynamics(self, rows: List[FilteredRow], week_start_iso: DateLike) -> List[Dict[str, Any]]:
        """Build the work row and the derived lunch row, always in that order"""
        s = self.settings
        work = self._empty_row(s.work_line, s.work_activity)
        lunch = self._empty_row(s.lunch_line, s.lunch_activity)

        week_start = WeekHelper.to_date(week_start_iso)
        if week_start is None:
            logger.warning(f"No valid week start ({week_start_iso!r}), producing empty rows")
            return [work, lunch]

        totals = self.totals_by_day(rows, week_start)
        for i, hours in enumerate(totals):
            if hours > 0:
                work[HOURS_COLS[i]] = hours
                work[COMMENT_COLS[i]] = s.work_comment
                lunch[HOURS_COLS[i]] = s.lunch_hours
                lunch[COMMENT_COLS[i]] = s.lunch_comment

        worked = [f"{DAY_LABELS[i]} {h:g}h" for i, h in enumerate(totals) if h > 0]
        logger.info(f"Week {week_start.isoformat()}: {', '.join(worked) or 'no hours'}")
        return [work, lunch]


class DynamicsExporter:
    """Serialize Dynamics rows to CSV or XLSX and build the preview table"""

    SHEET_NAME = "Import"

    @staticmethod
    def _format_csv_value(value: Any) -> str:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @classmethod
    def export_csv(cls, rows: List[Dict[str, Any]], headers: Sequence[str] = DYNAMICS_HEADERS) -> bytes:
        """Quoted CSV, '\\n' separated, no trailing newline"""
        lines = [",".join(f'"{h}"' for h in headers)]
        for row in rows:
            values = []
            for header in headers:
                value = row.get(header)
                if value is None:
                    values.append("")
                    continue
                text = cls._format_csv_value(value).replace('"', '""')
                values.append(f'"{text}"')
            lines.append(",".join(values))
        return "\n".join(lines).encode("utf-8")

    @classmethod
    def export_xlsx(cls, rows: List[Dict[str, Any]], headers: Sequence[str] = DYNAMICS_HEADERS) -> bytes:
        df = pd.DataFrame([[row.get(h) for h in headers] for row in rows], columns=list(headers))
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=cls.SHEET_NAME, index=False)
        return buffer.getvalue()

    @staticmethod
    def build_preview(rows: List[Dict[str, Any]]) -> pd.DataFrame:
        """Invoiced / Lunch / Total per weekday plus week totals"""
        columns = DAY_LABELS + ["Week Total"]
        if len(rows) < 2:
            return pd.DataFrame(columns=columns)

        def hours_of(row):
            return [float(row.get(col) or 0) for col in HOURS_COLS]

        work = hours_of(rows[0])
        lunch = hours_of(rows[1])
        total = [w + l for w, l in zip(work, lunch)]

        data = {
            "Invoiced": work + [sum(work)],
            "Lunch": lunch + [sum(lunch)],
            "Total": total + [sum(total)],
        }
        preview = pd.DataFrame.from_dict(data, orient="index", columns=columns)
        return preview.round(2)


def process_timesheet_conversion(
    input_path: str,
    week_start: Optional[str] = None,
    output_path: Optional[str] = None,
    config: Optional[Config] = None,
) -> List[Dict[str, Any]]:
    """Main processing function"""
    if config is None:
        config = load_config()

    reader = WorkforceReader(config)
    with open(input_path, "rb") as f:
        result = reader.read_file(f.read(), Path(input_path).name)

    check = WeekHelper.check_current_week_in_file(result.rows)
    if check.warning_message:
        logger.warning(check.warning_message)

    if week_start:
        week_start_iso = WeekHelper.set_week_start_from_date(week_start)
        if week_start_iso is None:
            raise ValueError(f"Invalid week start date: {week_start}")
    else:
        week_start_iso = WeekHelper.pick_initial_week(result.rows)
        if week_start_iso is None:
            logger.warning("No dated entries found")
            return []

    info = WeekHelper.get_week_info(week_start_iso)
    logger.info(f"Converting week {info.week_num}, {info.year} (starting {week_start_iso})")

    filtered = WeekHelper.filter_rows_to_week(result.rows, week_start_iso)
    rows = DynamicsTransformer(config.dynamics).transform_to_dynamics(filtered, week_start_iso)

    if output_path:
        if Path(output_path).suffix.lower() == ".csv":
            payload = DynamicsExporter.export_csv(rows)
        else:
            payload = DynamicsExporter.export_xlsx(rows)
        with open(output_path, "wb") as f:
            f.write(payload)
        logger.info(f"Dynamics import saved: {output_path}")

    return rows


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python timesheet_dynamics_app.py <workforce.xlsx> [week_start YYYY-MM-DD] [output.xlsx|output.csv]")
        print("Output: dynamics_import.xlsx")
        sys.exit(1)

    input_file = sys.argv[1]
    week_arg = sys.argv[2] if len(sys.argv) > 2 else None
    output_file = sys.argv[3] if len(sys.argv) > 3 else "dynamics_import.xlsx"

    process_timesheet_conversion(input_file, week_arg, output_file)
