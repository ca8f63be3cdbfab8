from models.lease import LeaseRow
from models.section import SectionInfo
