"""Header variants seen in the CRM export sheet, most specific first."""

ID_COLUMNS = ("Opportunity ID", "Opportunity Id", "Id", "ID")
NAME_COLUMNS = ("Opportunity Name", "Name", "Opportunity")
STAGE_COLUMNS = ("Stage", "StageName", "Stage Name")
ACCESS_METHOD_COLUMNS = (
    "Access Method (L)",
    "Access_Method_L__c",
    "Access Method L",
    "Access Method",
)
AMOUNT_COLUMNS = ("Amount", "Opp Amount", "Total Amount")
CLOSE_DATE_COLUMNS = ("Close Date", "CloseDate", "Close")
ACCOUNT_COLUMNS = ("Account Name", "Account", "AccountName")
OWNER_COLUMNS = ("Opportunity Owner", "Owner", "Owner Name", "OwnerName")
PROBABILITY_COLUMNS = ("Probability", "Probability (%)", "Win %")
CREATED_DATE_COLUMNS = ("Created Date", "CreatedDate", "Created")
MODIFIED_DATE_COLUMNS = (
    "Last Modified Date",
    "LastModifiedDate",
    "Last Modified",
    "Modified Date",
)
