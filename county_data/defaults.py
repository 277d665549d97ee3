"""
Built-in county table, state names and state auction rules.

These are the static defaults the dashboard starts from; a successful
live refresh replaces them wholesale.
"""

from typing import Dict, List

from .models import StateAuctionInfo

STATE_NAMES: Dict[str, str] = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas", "CA": "California",
    "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware", "DC": "District of Columbia",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois",
    "IN": "Indiana", "IA": "Iowa", "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana",
    "ME": "Maine", "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota",
    "MS": "Mississippi", "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma", "OR": "Oregon",
    "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina", "SD": "South Dakota",
    "TN": "Tennessee", "TX": "Texas", "UT": "Utah", "VT": "Vermont", "VA": "Virginia",
    "WA": "Washington", "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
}

# Positional rows: [name, pop, income, zhvi, growth, dom, tier, notes]
DEFAULT_COUNTY_ROWS: Dict[str, List[list]] = {
    "AL": [
        ["Shelby", 223024, 85678, 345000, 5.8, 32, 1, "Birmingham suburb"],
        ["Madison", 387545, 68234, 285000, 5.5, 32, 1, "Huntsville tech"],
        ["Baldwin", 231767, 62481, 320000, 5.8, 38, 1, "Gulf Coast"],
        ["Jefferson", 674721, 52891, 185000, 3.2, 42, 2, "Birmingham"],
        ["Mobile", 414809, 48234, 165000, 3.0, 48, 2, "Port city"],
    ],
    "AK": [
        ["Anchorage", 291247, 84567, 365000, 2.8, 45, 1, "Urban center"],
        ["Matanuska-Susitna", 108317, 75678, 325000, 4.5, 48, 2, "Mat-Su"],
        ["Fairbanks", 97121, 72345, 275000, 2.5, 55, 2, "Interior"],
    ],
    "AZ": [
        ["Maricopa", 4420568, 68234, 420000, 5.5, 30, 1, "Phoenix"],
        ["Pima", 1043433, 55234, 320000, 4.2, 42, 1, "Tucson"],
        ["Pinal", 464474, 58234, 345000, 5.8, 38, 2, "Phoenix spillover"],
    ],
    "CA": [
        ["Los Angeles", 9829544, 72000, 850000, 3.8, 35, 1, "LA metro"],
        ["San Diego", 3286069, 82000, 880000, 4.5, 28, 1, "Biotech"],
        ["Orange", 3167809, 100000, 1050000, 4.2, 30, 1, "OC"],
        ["San Francisco", 815201, 140000, 1350000, 2.5, 30, 1, "SF"],
    ],
    "CO": [
        ["Denver", 715522, 78000, 580000, 4.8, 28, 1, "Denver"],
        ["El Paso", 730395, 68000, 420000, 4.5, 32, 1, "CO Springs"],
        ["Boulder", 330758, 88000, 680000, 3.8, 35, 1, "CU"],
    ],
    "FL": [
        ["Miami-Dade", 2701767, 58000, 520000, 5.8, 35, 1, "Miami"],
        ["Broward", 1944375, 62000, 450000, 5.2, 32, 1, "Ft Lauderdale"],
        ["Palm Beach", 1492191, 72000, 520000, 4.8, 38, 1, "Palm Beach"],
        ["Hillsborough", 1459762, 62000, 380000, 5.5, 30, 1, "Tampa"],
        ["Orange", 1393452, 58000, 385000, 5.2, 32, 1, "Orlando"],
    ],
    "GA": [
        ["Fulton", 1066710, 72000, 420000, 5.2, 28, 1, "Atlanta"],
        ["Gwinnett", 936250, 72000, 380000, 4.8, 32, 1, "Atlanta NE"],
        ["Cobb", 760141, 78000, 420000, 4.5, 30, 1, "Marietta"],
    ],
    "HI": [
        ["Honolulu", 974563, 92000, 950000, 3.2, 35, 1, "Oahu"],
        ["Hawaii", 200983, 68000, 520000, 3.5, 48, 2, "Big Island"],
        ["Maui", 164637, 78000, 980000, 3.0, 52, 2, "Maui"],
    ],
    "ID": [
        ["Ada", 494967, 72000, 520000, 5.5, 28, 1, "Boise"],
        ["Canyon", 229849, 55000, 380000, 5.8, 35, 2, "Nampa"],
    ],
    "IL": [
        ["Cook", 5173146, 65000, 310000, 3.2, 35, 1, "Chicago"],
        ["DuPage", 932877, 95000, 380000, 2.8, 32, 1, "West suburbs"],
    ],
    "IN": [
        ["Hamilton", 338011, 105000, 385000, 4.5, 32, 1, "Carmel"],
        ["Marion", 977203, 52000, 215000, 4.2, 35, 2, "Indianapolis"],
    ],
    "IA": [
        ["Polk", 492401, 68000, 265000, 3.8, 35, 2, "Des Moines"],
    ],
    "KS": [
        ["Johnson", 609863, 92000, 350000, 3.8, 32, 1, "KC suburbs"],
    ],
    "KY": [
        ["Jefferson", 782969, 55000, 225000, 3.5, 38, 2, "Louisville"],
        ["Fayette", 323152, 58000, 265000, 3.8, 35, 2, "Lexington"],
    ],
    "LA": [
        ["East Baton Rouge", 456781, 55000, 235000, 3.2, 42, 2, "Baton Rouge"],
        ["Orleans", 383997, 45000, 285000, 3.5, 42, 2, "New Orleans"],
    ],
    "ME": [
        ["Cumberland", 303069, 78000, 450000, 3.5, 38, 2, "Portland"],
    ],
    "MD": [
        ["Montgomery", 1062061, 115000, 580000, 3.2, 32, 1, "DC suburbs"],
        ["Prince George's", 967201, 82000, 380000, 3.8, 35, 1, "DC suburbs"],
    ],
    "MA": [
        ["Middlesex", 1632002, 105000, 680000, 3.2, 28, 1, "Cambridge"],
        ["Suffolk", 803907, 78000, 680000, 3.0, 30, 1, "Boston"],
    ],
    "MI": [
        ["Oakland", 1274395, 78000, 320000, 3.8, 32, 1, "Detroit N"],
        ["Wayne", 1773922, 48000, 145000, 4.5, 38, 2, "Detroit"],
    ],
    "MN": [
        ["Hennepin", 1281565, 78000, 350000, 3.5, 28, 1, "Minneapolis"],
        ["Ramsey", 552352, 65000, 295000, 3.2, 32, 1, "St. Paul"],
    ],
    "MS": [
        ["DeSoto", 184945, 68000, 265000, 4.2, 38, 2, "Memphis sub"],
    ],
    "MO": [
        ["St. Louis County", 1004125, 72000, 265000, 2.8, 38, 2, "STL suburbs"],
        ["Jackson", 717204, 55000, 215000, 3.2, 40, 2, "Kansas City"],
    ],
    "MT": [
        ["Yellowstone", 164731, 58000, 350000, 4.2, 42, 2, "Billings"],
        ["Gallatin", 114434, 68000, 620000, 5.2, 38, 2, "Bozeman"],
    ],
    "NE": [
        ["Douglas", 584526, 68000, 265000, 3.5, 35, 2, "Omaha"],
    ],
    "NV": [
        ["Clark", 2265461, 58000, 420000, 5.5, 32, 1, "Las Vegas"],
        ["Washoe", 486492, 65000, 520000, 5.0, 35, 1, "Reno"],
    ],
    "NH": [
        ["Hillsborough", 422937, 82000, 420000, 3.8, 32, 1, "Manchester"],
    ],
    "NJ": [
        ["Bergen", 955732, 105000, 580000, 3.2, 32, 1, "NYC suburbs"],
        ["Middlesex", 863162, 92000, 480000, 3.5, 32, 1, "Central NJ"],
    ],
    "NM": [
        ["Bernalillo", 679121, 52000, 295000, 4.2, 42, 2, "Albuquerque"],
    ],
    "NY": [
        ["Kings", 2559903, 67000, 850000, 5.1, 25, 1, "Brooklyn"],
        ["Queens", 2253858, 72500, 680000, 4.8, 30, 1, "Queens"],
        ["New York", 1629153, 93651, 1150000, 4.2, 28, 1, "Manhattan"],
        ["Nassau", 1356924, 120000, 620000, 5.5, 28, 1, "Long Island"],
    ],
    "NC": [
        ["Wake", 1129410, 82000, 420000, 5.2, 28, 1, "Raleigh"],
        ["Mecklenburg", 1115482, 72000, 380000, 4.8, 30, 1, "Charlotte"],
    ],
    "ND": [
        ["Cass", 184525, 62000, 295000, 3.2, 38, 2, "Fargo"],
    ],
    "OH": [
        ["Franklin", 1323807, 62000, 285000, 4.8, 28, 1, "Columbus"],
        ["Cuyahoga", 1235072, 52000, 165000, 2.5, 42, 2, "Cleveland"],
    ],
    "OK": [
        ["Oklahoma", 797434, 55000, 195000, 3.5, 38, 2, "OKC"],
        ["Tulsa", 669279, 55000, 195000, 3.2, 40, 2, "Tulsa"],
    ],
    "OR": [
        ["Multnomah", 812855, 72000, 520000, 4.0, 32, 1, "Portland"],
        ["Washington", 600372, 85000, 550000, 4.5, 30, 1, "Hillsboro"],
    ],
    "PA": [
        ["Philadelphia", 1576251, 52000, 220000, 4.5, 35, 2, "Philadelphia"],
        ["Allegheny", 1218380, 62000, 225000, 3.8, 38, 2, "Pittsburgh"],
        ["Montgomery", 856553, 95000, 420000, 3.5, 32, 1, "Main Line"],
    ],
    "RI": [
        ["Providence", 660741, 58000, 350000, 3.8, 38, 2, "Providence"],
    ],
    "SC": [
        ["Charleston", 411406, 68000, 420000, 4.8, 35, 1, "Charleston"],
        ["Greenville", 523542, 62000, 285000, 4.5, 35, 2, "Greenville"],
    ],
    "SD": [
        ["Minnehaha", 197214, 62000, 295000, 4.0, 35, 2, "Sioux Falls"],
    ],
    "TN": [
        ["Davidson", 715884, 62000, 380000, 5.2, 32, 1, "Nashville"],
        ["Shelby", 937166, 52000, 225000, 3.8, 38, 2, "Memphis"],
    ],
    "TX": [
        ["Harris", 4731145, 63000, 285000, 4.5, 32, 1, "Houston"],
        ["Dallas", 2613539, 62000, 320000, 5.2, 28, 1, "Dallas"],
        ["Tarrant", 2110640, 68000, 310000, 4.8, 30, 1, "Fort Worth"],
        ["Travis", 1290188, 85000, 520000, 6.5, 25, 1, "Austin"],
        ["Collin", 1064465, 110000, 480000, 5.8, 28, 1, "Plano"],
    ],
    "UT": [
        ["Salt Lake", 1160437, 72000, 520000, 5.5, 28, 1, "Salt Lake City"],
        ["Utah", 659399, 72000, 480000, 5.8, 30, 1, "Provo"],
    ],
    "VT": [
        ["Chittenden", 168323, 78000, 450000, 3.5, 38, 2, "Burlington"],
    ],
    "VA": [
        ["Fairfax", 1150309, 130000, 680000, 3.5, 28, 1, "Fairfax"],
        ["Prince William", 482204, 105000, 480000, 4.5, 32, 1, "Woodbridge"],
        ["Loudoun", 420959, 155000, 680000, 4.0, 30, 1, "Leesburg"],
    ],
    "WA": [
        ["King", 2269675, 105000, 780000, 4.5, 25, 1, "Seattle"],
        ["Pierce", 921130, 72000, 480000, 5.2, 32, 1, "Tacoma"],
        ["Snohomish", 827957, 88000, 620000, 5.0, 30, 1, "Everett"],
    ],
    "WV": [
        ["Berkeley", 119171, 62000, 265000, 4.0, 45, 2, "Martinsburg"],
    ],
    "WI": [
        ["Milwaukee", 939489, 48000, 185000, 4.0, 38, 2, "Milwaukee"],
        ["Dane", 561504, 72000, 380000, 4.5, 32, 1, "Madison"],
    ],
    "WY": [
        ["Laramie", 100512, 58000, 295000, 3.5, 48, 3, "Cheyenne"],
        ["Teton", 23464, 92000, 1250000, 4.0, 55, 2, "Jackson"],
    ],
    "AR": [
        ["Benton", 284333, 72345, 295000, 5.8, 32, 1, "NW Arkansas"],
        ["Washington", 245871, 55678, 285000, 5.2, 35, 1, "Fayetteville"],
    ],
    "CT": [
        ["Fairfield", 943332, 105000, 580000, 3.2, 38, 1, "NYC suburbs"],
    ],
    "DE": [
        ["New Castle", 570719, 72000, 320000, 3.5, 38, 2, "Wilmington"],
    ],
}

DEFAULT_AUCTION_INFO: Dict[str, StateAuctionInfo] = {
    "AL": StateAuctionInfo("AL", "Lien", "12%", "3 years", "Most sales May-June; 12% interest from date of sale"),
    "AZ": StateAuctionInfo("AZ", "Lien", "16%", "3 years", "Bid-down process; max 16% simple interest"),
    "CO": StateAuctionInfo("CO", "Lien", "Fed rate + 9pts", "3 years", "Premium bidding; no premium reimbursement"),
    "CT": StateAuctionInfo("CT", "Lien", "18%", "6 months", "Combined lien/deed format; larger towns only"),
    "DC": StateAuctionInfo("DC", "Lien", "18%", "6 months - 1 year", "Premium bidding; no interest on overbid"),
    "FL": StateAuctionInfo("FL", "Lien", "18%", "2 years", "Bid-down; guaranteed 5% minimum return"),
    "GA": StateAuctionInfo("GA", "Lien", "20-40%", "1 year", "20% year 1; escalates to 30% after 2yrs, 40% after 3yrs"),
    "IL": StateAuctionInfo("IL", "Lien", "18%", "2 years", "Bid-down from 18%; graduated penalty redemption"),
    "IN": StateAuctionInfo("IN", "Lien", "Graduated", "1 year", "A/B/C Sales process; Commissioner's Sale for county-titled"),
    "IA": StateAuctionInfo("IA", "Lien", "24%", "1 year 9 months", "Bid least undivided ownership interest; highest rate"),
    "KY": StateAuctionInfo("KY", "Lien", "12%", "1 year", "12% interest from date of issuance"),
    "LA": StateAuctionInfo("LA", "Lien", "Bid-down", "3 years", "2024-2025 reform: bid-down interest system; online now available"),
    "MD": StateAuctionInfo("MD", "Lien", "18-24%", "6 months", "Statutory 6% but most counties charge 18-24%"),
    "MA": StateAuctionInfo("MA", "Lien", "16%", "Collector's deed", "Smallest undivided part auction; 16% rate"),
    "MS": StateAuctionInfo("MS", "Lien", "18%", "2 years", "Tax lien state"),
    "MO": StateAuctionInfo("MO", "Lien", "10%", "2 years", "10% interest; 18% penalty each year delinquent"),
    "MT": StateAuctionInfo("MT", "Lien", "10%", "2-3 years", "5/6 of 1% per month (10% per annum)"),
    "NE": StateAuctionInfo("NE", "Lien", "14%", "3 years", "Undivided interest at 14% per annum"),
    "NH": StateAuctionInfo("NH", "Lien", "18%", "2 years", "Auction for percentage of undivided interest"),
    "NJ": StateAuctionInfo("NJ", "Lien", "18%", "2 years", "Bid-down from 18%; active market"),
    "OK": StateAuctionInfo("OK", "Lien", "8%", "2 years", "Multiple bidders decided by random drawing"),
    "RI": StateAuctionInfo("RI", "Lien", "10% + 1%/mo", "1 year", "Collector's Deed; 10% first 6mo, 1%/mo after"),
    "SC": StateAuctionInfo("SC", "Lien", "8% penalty", "1 year", "Highest and best bidder wins"),
    "SD": StateAuctionInfo("SD", "Lien", "12% (max 10% bid)", "3-4 years", "Bid-down from 10%; 12% statutory"),
    "WV": StateAuctionInfo("WV", "Lien", "12%", "1 year", "Highest bidder at public auction"),
    "WY": StateAuctionInfo("WY", "Lien", "15% + 3% penalty", "4 years", "Longest redemption; 15% + 3% penalty + fees"),
    "AK": StateAuctionInfo("AK", "Deed", "N/A", "1 year", "Municipal foreclosure; deeded to borough/city if unredeemed"),
    "AR": StateAuctionInfo("AR", "Deed", "N/A", "30 days", "Forfeited to state; limited warranty deed after 30 days"),
    "CA": StateAuctionInfo("CA", "Deed", "N/A", "5 years (3 for some)", "Tax Collector's Deed; free of pre-existing encumbrances"),
    "DE": StateAuctionInfo("DE", "Deed", "15%", "60 days", "Judicial foreclosure; 15% penalty on redemption"),
    "HI": StateAuctionInfo("HI", "Deed", "N/A", "1 year", "3-year lien before auction; 1-year redemption after sale"),
    "ID": StateAuctionInfo("ID", "Deed", "N/A", "3 years before deed", "Tax deed to county after 3 years; then sold at auction"),
    "KS": StateAuctionInfo("KS", "Deed", "N/A", "Court judgment", "Bid off to county; court petition for foreclosure"),
    "ME": StateAuctionInfo("ME", "Deed", "N/A", "18 months", "Tax lien mortgage auto-forecloses after 18 months"),
    "MI": StateAuctionInfo("MI", "Deed", "N/A", "None after sale", "Forfeit lands; auction 3rd Tuesday July; min bid = taxes + FMV"),
    "MN": StateAuctionInfo("MN", "Deed", "N/A", "None after sale", "Tax-forfeited land auctions; cash or installment"),
    "NV": StateAuctionInfo("NV", "Deed", "N/A", "2 years before deed", "Tax deed to Treasurer after 2yr; then auction"),
    "NM": StateAuctionInfo("NM", "Deed", "N/A", "120 days IRS only", "No owner redemption; Quitclaim Deed issued"),
    "NY": StateAuctionInfo("NY", "Deed", "N/A", "2-4 years", "2yr standard; 3-4yr for residential/farm; judicial foreclosure"),
    "NC": StateAuctionInfo("NC", "Deed", "N/A", "Upset bid period", "Judicial foreclosure or docketing certificate"),
    "ND": StateAuctionInfo("ND", "Deed", "Max 9%", "4 years", "Bid-down from 9%; 4yr redemption from due date"),
    "OH": StateAuctionInfo("OH", "Deed", "N/A", "None after sale", "Judicial foreclosure after 2yr delinquent; Sheriff's sale"),
    "OR": StateAuctionInfo("OR", "Deed", "N/A", "2 years before deed", "Foreclosure after 3yr; sold to county; 2yr redemption"),
    "PA": StateAuctionInfo("PA", "Deed", "N/A", "None after sale", "Upset Sale; min bid = taxes + interest + costs"),
    "TN": StateAuctionInfo("TN", "Deed", "N/A", "1 year", "2yr delinquent before Chancery Court suit"),
    "TX": StateAuctionInfo("TX", "Deed", "25% penalty", "6mo-2yr", "6mo non-Homestead; 2yr Homestead/Ag; 25% penalty"),
    "UT": StateAuctionInfo("UT", "Deed", "N/A", "4 years", "Preliminary sale Jan 16; final sale May 4yr later"),
    "VT": StateAuctionInfo("VT", "Deed", "N/A", "1 year", "Foreclosure after 2yr; Collector's Deed after 1yr redemption"),
    "VA": StateAuctionInfo("VA", "Deed", "N/A", "Surplus rights only", "Judicial foreclosure; 3yr after due date; surplus to former owner"),
    "WA": StateAuctionInfo("WA", "Deed", "N/A", "3 years before sale", "Certificate of delinquency after 3yr; foreclosure judgment"),
    "WI": StateAuctionInfo("WI", "Deed", "N/A", "2 years", "Tax deed after 2yr certificate; county cannot sell certificate"),
}
