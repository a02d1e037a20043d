"""Embedded TLD table.

Literal snapshot of root zone entries, grouped by registry type. Each row is
``(code, provider, registered_on, last_updated_on)``; dates are ISO strings
and ``None`` means the snapshot carried no value. Rows without a
``last_updated_on`` are stamped with :data:`SNAPSHOT_DATE` at load time.

Special-use names (``localhost``, ``example``, ``invalid``, ``test``,
``local``, ``onion``, ``alt``) are not delegated and are deliberately absent.

This module is pure data. Lookup logic lives in :mod:`domaddr.domain.registry`.
"""

from __future__ import annotations

from domaddr.domain.types import TLDType

SNAPSHOT_DATE = "2024-06-01"

_Row = tuple[str, str | None, str | None, str | None]

# ============================================================================
# INFRASTRUCTURE
# ============================================================================
INFRASTRUCTURE_TLDS: list[_Row] = [
    ("arpa", "Internet Architecture Board (IAB)", "1985-01-01", "2023-12-15"),
]

# ============================================================================
# GENERIC (legacy)
# ============================================================================
LEGACY_GENERIC_TLDS: list[_Row] = [
    ("com", "VeriSign Global Registry Services", "1985-01-01", "2023-12-07"),
    ("net", "VeriSign Global Registry Services", "1985-01-01", "2023-12-07"),
    ("org", "Public Interest Registry (PIR)", "1985-01-01", "2023-11-30"),
    ("info", "Identity Digital Limited", "2001-06-26", "2023-07-21"),
    ("mobi", "Identity Digital Limited", "2005-10-20", "2023-07-21"),
]

# ============================================================================
# GENERIC-RESTRICTED
# ============================================================================
GENERIC_RESTRICTED_TLDS: list[_Row] = [
    ("biz", "Registry Services, LLC", "2001-06-26", "2023-09-12"),
    ("name", "VeriSign Information Services, Inc.", "2001-08-16", "2023-08-04"),
    ("pro", "Identity Digital Limited", "2002-05-06", "2023-07-21"),
]

# ============================================================================
# SPONSORED
# ============================================================================
SPONSORED_TLDS: list[_Row] = [
    ("aero", "Societe Internationale de Telecommunications Aeronautique (SITA INC USA)", "2001-12-21", "2023-06-14"),
    ("asia", "DotAsia Organisation Ltd.", "2007-05-02", "2023-02-27"),
    ("cat", "Fundacio puntCAT", "2005-12-19", "2023-04-03"),
    ("coop", "DotCooperation LLC", "2001-12-15", "2022-11-29"),
    ("edu", "EDUCAUSE", "1985-01-01", "2023-05-25"),
    ("gov", "Cybersecurity and Infrastructure Security Agency", "1985-01-01", "2023-04-25"),
    ("int", "Internet Assigned Numbers Authority", "1988-11-03", "2023-10-05"),
    ("jobs", "Employ Media LLC", "2005-09-08", "2022-12-13"),
    ("mil", "DoD Network Information Center", "1985-01-01", "2023-01-31"),
    ("museum", "Museum Domain Management Association", "2001-10-30", "2023-03-20"),
    ("post", "Universal Postal Union", "2012-08-07", "2022-10-18"),
    ("tel", "Telnames Ltd.", "2007-03-01", "2023-02-14"),
    ("travel", "Dog Beach, LLC", "2005-07-27", "2023-08-22"),
    ("xxx", "ICM Registry LLC", "2011-04-15", "2023-05-09"),
]

# ============================================================================
# COUNTRY-CODE
# ============================================================================
COUNTRY_CODE_TLDS: list[_Row] = [
    ("ac", "Internet Computer Bureau Limited", "1997-12-19", "2023-05-02"),
    ("ad", "Andorra Telecom", "1996-01-09", None),
    ("ae", "Telecommunications and Digital Government Regulatory Authority (TDRA)", "1992-11-01", "2023-03-08"),
    ("af", "Ministry of Communications and IT", "1997-10-16", None),
    ("ag", "UHSA School of Medicine", "1991-09-03", None),
    ("ai", "Government of Anguilla", "1995-02-16", "2024-01-10"),
    ("al", "Electronic and Postal Communications Authority - AKEP", "1992-04-21", None),
    ("am", "Internet Society", "1994-08-26", None),
    ("ao", "Ministry of Telecommunications and Information Technologies (MTTI)", "1995-11-20", None),
    ("aq", "Antarctica Network Information Centre Limited", "1992-07-26", None),
    ("ar", "Presidencia de la Nacion - Secretaria Legal y Tecnica", "1987-09-23", "2023-02-15"),
    ("as", "AS Domain Registry", "1997-06-12", None),
    ("at", "nic.at GmbH", "1988-01-20", "2023-06-28"),
    ("au", ".au Domain Administration (auDA)", "1986-03-05", "2023-04-12"),
    ("aw", "SETAR", "1996-02-20", None),
    ("ax", "Ahvenanmaan maakunnan hallitus", "2006-06-21", None),
    ("az", "IntraNS", "1993-08-25", None),
    ("ba", "Universtiy Telinformatic Centre (UTIC)", "1996-08-14", None),
    ("bb", "Government of Barbados", "1991-09-03", None),
    ("bd", "Posts and Telecommunications Division", "1999-05-20", None),
    ("be", "DNS Belgium vzw/asbl", "1988-08-05", "2023-09-19"),
    ("bf", "Autorite de Regulation des Communications Electroniques et des Postes (ARCEP)", "1993-03-29", None),
    ("bg", "Imena.BG AD", "1995-01-03", None),
    ("bh", "Telecommunications Regulatory Authority (TRA)", "1994-02-18", None),
    ("bi", "Centre National de l'Informatique", "1996-10-14", None),
    ("bj", "Autorite de Regulation des Communications Electroniques et de la Poste du Benin (ARCEP BENIN)", "1996-01-18", None),
    ("bm", "Registry General Department, Ministry of Home Affairs", "1993-03-31", None),
    ("bn", "Authority for Info-communications Technology Industry of Brunei Darussalam (AITI)", "1994-06-03", None),
    ("bo", "Agencia para el Desarrollo de la Informacion de la Sociedad en Bolivia", "1991-02-26", None),
    ("bq", "Not assigned", "2010-12-20", None),
    ("br", "Comite Gestor da Internet no Brasil", "1989-04-18", "2023-08-30"),
    ("bs", "University of The Bahamas", "1991-09-03", None),
    ("bt", "Ministry of Information and Communications", "1997-03-31", None),
    ("bw", "Botswana Communications Regulatory Authority (BOCRA)", "1993-03-19", None),
    ("by", "Reliable Software, Ltd.", "1994-05-10", None),
    ("bz", "University of Belize", "1991-09-03", None),
    ("ca", "Canadian Internet Registration Authority (CIRA)", "1987-05-14", "2023-10-24"),
    ("cc", "eNIC Cocos (Keeling) Islands Pty. Ltd. d/b/a Island Internet Services", "1997-10-13", "2023-05-16"),
    ("cd", "Office Congolais des Postes et Telecommunications - OCPT", "1997-08-20", None),
    ("cf", "Societe Centrafricaine de Telecommunications (SOCATEL)", "1996-04-24", None),
    ("cg", "Interpoint Switzerland", "1997-01-14", None),
    ("ch", "SWITCH The Swiss Education & Research Network", "1987-05-20", "2023-07-05"),
    ("ci", "Autorite de Regulation des Telecommunications/TIC de Cote d'lvoire (ARTCI)", "1995-02-14", None),
    ("ck", "Telecom Cook Islands Ltd.", "1995-08-08", None),
    ("cl", "NIC Chile (University of Chile)", "1987-12-17", "2023-03-28"),
    ("cm", "Cameroon Telecommunications (CAMTEL)", "1995-04-29", None),
    ("cn", "China Internet Network Information Center (CNNIC)", "1990-11-28", "2023-08-16"),
    ("co", ".CO Internet S.A.S.", "1991-12-24", "2023-11-14"),
    ("cr", "National Academy of Sciences Academia Nacional de Ciencias", "1990-09-10", None),
    ("cu", "CENIAInternet Industria y San Jose Capitolio Nacional", "1992-05-03", None),
    ("cv", "Agencia Reguladora Multissectorial da Economia (ARME)", "1996-10-21", None),
    ("cw", "University of Curacao", "2010-12-20", None),
    ("cx", "Christmas Island Domain Administration Limited", "1997-06-02", None),
    ("cy", "University of Cyprus", "1994-07-26", None),
    ("cz", "CZ.NIC, z.s.p.o", "1993-01-13", "2023-09-05"),
    ("de", "DENIC eG", "1986-11-05", "2023-01-11"),
    ("dj", "Djibouti Telecom S.A", "1996-09-19", None),
    ("dk", "Punktum dk A/S", "1987-07-14", "2023-02-21"),
    ("dm", "DotDM Corporation", "1991-09-03", None),
    ("do", "Pontificia Universidad Catolica Madre y Maestra Recinto Santo Tomas de Aquino", "1991-08-25", None),
    ("dz", "CERIST", "1994-01-03", None),
    ("ec", "ECUADORDOMAIN S.A.", "1991-11-01", None),
    ("ee", "Eesti Interneti Sihtasutus (EIS)", "1992-06-03", "2023-04-18"),
    ("eg", "Egyptian Universities Network (EUN) Supreme Council of Universities", "1990-11-13", None),
    ("er", "Eritrea Telecommunication Services Corporation (EriTel)", "1996-09-24", None),
    ("es", "Red.es", "1988-04-14", "2023-05-23"),
    ("et", "Ethio telecom", "1995-10-22", None),
    ("eu", "EURid vzw", "2005-03-22", "2023-10-17"),
    ("fi", "Finnish Transport and Communications Agency Traficom", "1986-12-17", "2023-03-14"),
    ("fj", "The University of the South Pacific IT Services", "1992-06-03", None),
    ("fk", "Falkland Islands Government", "1997-06-12", None),
    ("fm", "FSM Telecommunications Corporation", "1995-02-27", None),
    ("fo", "FO Council", "1997-05-30", None),
    ("fr", "Association Francaise pour le Nommage Internet en Cooperation (A.F.N.I.C.)", "1986-09-02", "2023-06-06"),
    ("ga", "Agence Nationale des Infrastructures Numeriques et des Frequences (ANINF)", "1994-12-14", None),
    ("gd", "The National Telecommunications Regulatory Commission (NTRC)", "1992-06-03", None),
    ("ge", "Caucasus Online LLC", "1992-12-02", None),
    ("gf", "CANAL+ TELECOM", "1996-04-01", None),
    ("gg", "Island Networks Ltd.", "1996-05-21", None),
    ("gh", "Network Computer Systems Limited", "1995-01-19", None),
    ("gi", "Sapphire Networks", "1995-09-15", None),
    ("gl", "TELE Greenland A/S", "1994-03-08", None),
    ("gm", "GM-NIC", "1997-05-05", None),
    ("gn", "Centre National des Sciences Halieutiques de Boussoura", "1994-07-22", None),
    ("gp", "Networking Technologies Group", "1996-10-21", None),
    ("gq", "GETESA", "1997-03-31", None),
    ("gr", "ICS-FORTH GR", "1989-06-24", None),
    ("gs", "Government of South Georgia and South Sandwich Islands (GSGSSI)", "1997-07-31", None),
    ("gt", "Universidad del Valle de Guatemala", "1992-08-14", None),
    ("gu", "University of Guam", "1994-04-15", None),
    ("gw", "Autoridade Reguladora Nacional - Tecnologias de Informacao e Comunicacao da Guine-Bissau", "1997-05-20", None),
    ("gy", "University of Guyana", "1994-09-28", None),
    ("hk", "Hong Kong Internet Registration Corporation Ltd.", "1990-01-03", "2023-04-26"),
    ("hm", "HM Domain Registry", "1997-07-03", None),
    ("hn", "Red de Desarrollo Sostenible Honduras", "1993-04-16", None),
    ("hr", "CARNet - Croatian Academic and Research Network", "1993-02-26", None),
    ("ht", "Consortium FDS/RDDH", "1997-03-06", None),
    ("hu", "Council of Hungarian Internet Providers (CHIP)", "1990-11-07", None),
    ("id", "Perkumpulan Pengelola Nama Domain Internet Indonesia (PANDI)", "1993-02-27", None),
    ("ie", "University College Dublin Computing Services Computer Centre", "1988-01-27", "2023-02-08"),
    ("il", "The Israel Internet Association (RA)", "1985-10-24", "2023-06-20"),
    ("im", "Isle of Man Government", "1996-09-11", None),
    ("in", "National Internet Exchange of India", "1989-05-08", "2023-09-26"),
    ("io", "Internet Computer Bureau Limited", "1997-09-16", "2023-05-02"),
    ("iq", "Communications and Media Commission (CMC)", "1997-05-09", None),
    ("ir", "Institute for Research in Fundamental Sciences", "1994-04-07", None),
    ("is", "ISNIC - Internet Iceland ltd.", "1987-11-18", None),
    ("it", "IIT - CNR", "1987-12-23", "2023-07-11"),
    ("je", "Island Networks (Jersey) Ltd.", "1996-05-21", None),
    ("jm", "University of West Indies", "1991-09-24", None),
    ("jo", "Ministry of Digital Economy and Entrepreneurship (MoDEE)", "1995-01-18", None),
    ("jp", "Japan Registry Services Co., Ltd.", "1986-08-05", "2023-05-30"),
    ("ke", "Kenya Network Information Center (KeNIC)", "1993-03-26", None),
    ("kg", "AsiaInfo Telecommunication Enterprise", "1995-03-08", None),
    ("kh", "Telecommunication Regulator of Cambodia (TRC)", "1996-02-20", None),
    ("ki", "Ministry of Information, Communications and Transport (MICT)", "1995-07-21", None),
    ("km", "Comores Telecom", "1998-08-17", None),
    ("kn", "Ministry of Finance, Sustainable Development Information & Technology", "1991-09-03", None),
    ("kp", "Star Joint Venture Company", "2007-09-24", None),
    ("kr", "Korea Internet & Security Agency (KISA)", "1986-09-29", "2023-01-18"),
    ("kw", "Communications and Information Technology Regulatory Authority", "1992-10-15", None),
    ("ky", "International Computer Services Ltd.", "1995-01-25", None),
    ("kz", "Association of IT Companies of Kazakhstan", "1994-09-19", None),
    ("la", "Lao National Internet Center (LANIC), Ministry of Technology and Communications", "1996-05-14", None),
    ("lb", "Internet Society Lebanon", "1993-08-25", None),
    ("lc", "University of Puerto Rico", "1991-09-03", None),
    ("li", "SWITCH The Swiss Education & Research Network", "1993-02-11", None),
    ("lk", "Council for Information Technology LK Domain Registrar", "1990-06-15", None),
    ("lr", "Data Technology Solutions, Inc.", "1997-04-09", None),
    ("ls", "Lesotho Network Information Centre Proprietary (LSNIC)", "1993-12-16", None),
    ("lt", "Kaunas University of Technology", "1992-06-03", None),
    ("lu", "RESTENA", "1995-04-26", None),
    ("lv", "University of Latvia Institute of Mathematics and Computer Science Department of Network Solutions (DNS)", "1993-04-29", None),
    ("ly", "General Post and Telecommunication Company", "1997-04-23", None),
    ("ma", "Agence Nationale de Reglementation des Telecommunications (ANRT)", "1993-11-24", None),
    ("mc", "Gouvernement de Monaco Direction des Communications Electroniques", "1995-09-21", None),
    ("md", "IP Serviciul Tehnologia Informatiei si Securitate Cibernetica", "1994-10-17", None),
    ("me", "Government of Montenegro", "2007-09-24", "2023-03-01"),
    ("mg", "NIC-MG (Network Information Center Madagascar)", "1995-04-21", None),
    ("mh", "Office of the Cabinet", "1996-08-28", None),
    ("mk", "Macedonian Academic Research Network Skopje", "1993-09-23", None),
    ("ml", "Agence des Technologies de l'Information et de la Communication", "1993-09-29", None),
    ("mm", "Ministry of Transport and Communications", "1997-02-04", None),
    ("mn", "Datacom Co., Ltd.", "1995-03-02", None),
    ("mo", "Macao Post and Telecommunications Bureau (CTT)", "1992-09-17", None),
    ("mp", "Saipan Datacom, Inc.", "1996-10-22", None),
    ("mq", "CANAL+ TELECOM", "1996-04-01", None),
    ("mr", "Universite de Nouakchott Al Aasriya", "1996-04-24", None),
    ("ms", "MNI Networks Ltd.", "1997-06-11", None),
    ("mt", "NIC (Malta)", "1992-12-02", None),
    ("mu", "Internet Direct Ltd", "1995-08-10", None),
    ("mv", "Dhiraagu Pvt. Ltd. (DHIVEHINET)", "1996-03-21", None),
    ("mw", "Malawi Sustainable Development Network Programme (Malawi SDNP)", "1997-04-17", None),
    ("mx", "NIC-Mexico ITESM - Campus Monterrey", "1989-02-01", "2023-02-07"),
    ("my", "MYNIC Berhad", "1987-06-10", None),
    ("mz", "Centro de Informatica de Universidade Eduardo Mondlane", "1992-11-04", None),
    ("na", "Namibian Network Information Center", "1991-05-08", None),
    ("nc", "Office des Postes et Telecommunications", "1993-09-07", None),
    ("ne", "SONITEL", "1996-05-01", None),
    ("nf", "Norfolk Island Data Services", "1996-03-19", None),
    ("ng", "Nigeria Internet Registration Association", "1995-03-15", None),
    ("ni", "Universidad Nacional del Ingernieria Centro de Computo", "1989-10-13", None),
    ("nl", "SIDN (Stichting Internet Domeinregistratie Nederland)", "1986-04-25", "2023-06-13"),
    ("no", "Norid A/S", "1987-03-17", "2023-04-04"),
    ("np", "Mercantile Communications Pvt. Ltd.", "1995-01-25", None),
    ("nr", "CENPAC NET", "1998-03-18", None),
    ("nu", "The IUSN Foundation", "1997-02-27", None),
    ("nz", "InternetNZ", "1987-01-19", "2023-08-08"),
    ("om", "Telecommunications Regulatory Authority (TRA)", "1996-04-11", None),
    ("pa", "Universidad Tecnologica de Panama", "1994-05-25", None),
    ("pe", "Red Cientifica Peruana", "1991-11-25", None),
    ("pf", "Gouvernement de la Polynesie francaise", "1996-03-19", None),
    ("pg", "PNG DNS Administration Vice Chancellors Office The Papua New Guinea University of Technology", "1991-09-26", None),
    ("ph", "PH Domain Foundation", "1990-09-14", None),
    ("pk", "PKNIC", "1992-06-03", None),
    ("pl", "Research and Academic Computer Network", "1990-07-30", "2023-05-17"),
    ("pm", "Association Francaise pour le Nommage Internet en Cooperation (A.F.N.I.C.)", "1997-08-20", None),
    ("pn", "Pitcairn Island Administration", "1997-07-10", None),
    ("pr", "Gauss Research Laboratory Inc.", "1989-08-27", None),
    ("ps", "Ministry Of Telecommunications & Information Technology, Government Computer Center.", "2000-03-22", None),
    ("pt", "Associacao DNS.PT", "1988-06-30", "2023-03-22"),
    ("pw", "Micronesia Investment and Development Corporation", "1997-06-12", None),
    ("py", "NIC-PY", "1991-09-09", None),
    ("qa", "Communications Regulatory Authority", "1996-06-26", None),
    ("re", "Association Francaise pour le Nommage Internet en Cooperation (A.F.N.I.C.)", "1997-04-07", None),
    ("ro", "National Institute for R&D in Informatics", "1993-02-26", None),
    ("rs", "Serbian National Internet Domain Registry (RNIDS)", "2007-09-24", None),
    ("ru", "Coordination Center for TLD RU", "1994-04-07", "2023-10-03"),
    ("rw", "Rwanda Internet Community and Technology Alliance (RICTA) Ltd", "1996-10-22", None),
    ("sa", "Communications, Space and Technology Commission", "1994-05-17", None),
    ("sb", "Solomon Telekom Company Limited", "1994-09-12", None),
    ("sc", "VCS Pty Ltd", "1997-05-29", None),
    ("sd", "Sudan Internet Society", "1997-01-10", None),
    ("se", "The Internet Infrastructure Foundation", "1986-09-04", "2023-05-10"),
    ("sg", "Singapore Network Information Centre (SGNIC) Pte Ltd", "1988-10-19", "2023-02-28"),
    ("sh", "Government of St. Helena", "1997-09-16", None),
    ("si", "Academic and Research Network of Slovenia (ARNES)", "1992-04-01", None),
    ("sk", "SK-NIC, a.s.", "1993-03-29", None),
    ("sl", "Sierratel", "1997-05-09", None),
    ("sm", "Telecom Italia San Marino S.p.A.", "1995-08-16", None),
    ("sn", "Universite Cheikh Anta Diop", "1993-03-19", None),
    ("so", "Ministry of Post and Telecommunications", "1997-08-28", None),
    ("sr", "Telesur", "1991-09-03", None),
    ("ss", "National Communication Authority (NCA)", "2011-08-31", None),
    ("st", "Tecnisys", "1997-02-04", None),
    ("su", "Russian Institute for Development of Public Networks (ROSNIIROS)", "1990-09-19", None),
    ("sv", "SVNet", "1994-10-25", None),
    ("sx", "SX Registry SA B.V.", "2010-12-20", None),
    ("sy", "National Agency for Network Services (NANS)", "1996-02-20", None),
    ("sz", "University of Swaziland Department of Computer Science", "1993-11-03", None),
    ("tc", "Melrex TC", "1997-03-22", None),
    ("td", "l'Agence de Developpement des Technologies de l'Information et de la Communication (ADETIC)", "1997-03-24", None),
    ("tf", "Association Francaise pour le Nommage Internet en Cooperation (A.F.N.I.C.)", "1997-08-26", None),
    ("tg", "Autorite de Reglementation des secteurs de Postes et de Telecommunications (ART&P)", "1996-09-05", None),
    ("th", "Thai Network Information Center Foundation", "1988-09-07", None),
    ("tj", "Information Technology Center", "1997-12-08", None),
    ("tk", "Telecommunication Tokelau Corporation (Teletok)", "1997-11-11", None),
    ("tl", "Autoridade Nacional de Comunicacoes", "2005-03-23", None),
    ("tm", "TM Domain Registry Ltd", "1997-05-31", None),
    ("tn", "Agence Tunisienne d'Internet", "1991-05-17", None),
    ("to", "Government of the Kingdom of Tonga H.R.H. Crown Prince Tupouto'a c/o Consulate of Tonga", "1995-07-10", None),
    ("tr", "Bilgi Teknolojileri ve Iletisim Kurumu (BTK)", "1990-09-17", None),
    ("tt", "University of the West Indies Faculty of Engineering", "1991-09-03", None),
    ("tv", "Ministry of Justice, Communications and Foreign Affairs", "1996-03-29", "2023-04-11"),
    ("tw", "Taiwan Network Information Center (TWNIC)", "1989-07-31", "2023-07-25"),
    ("tz", "Tanzania Network Information Centre (tzNIC)", "1995-08-01", None),
    ("ua", "Hostmaster Ltd.", "1992-12-01", None),
    ("ug", "Uganda Online Ltd.", "1995-03-03", None),
    ("uk", "Nominet UK", "1985-07-24", "2023-08-15"),
    ("us", "Registry Services, LLC", "1985-02-15", "2023-09-12"),
    ("uy", "SeCIU - Universidad de la Republica", "1990-09-14", None),
    ("uz", "Single Integrator for Creation and Support of State Information Systems UZINFOCOM", "1995-04-29", None),
    ("va", "Holy See - Vatican City State", "1995-09-11", None),
    ("vc", "Ministry of Telecommunications, Science, Technology and Industry", "1991-09-03", None),
    ("ve", "Comision Nacional de Telecomunicaciones (CONATEL)", "1991-03-07", None),
    ("vg", "Telecommunications Regulatory Commission of the Virgin Islands", "1997-02-20", None),
    ("vi", "Virgin Islands Public Telecommunications System, Inc.", "1995-08-31", None),
    ("vn", "Viet Nam Internet Network Information Center (VNNIC)", "1994-04-14", None),
    ("vu", "Telecommunications Radiocommunications and Broadcasting Regulator (TRBR)", "1995-02-16", None),
    ("wf", "Association Francaise pour le Nommage Internet en Cooperation (A.F.N.I.C.)", "1997-08-26", None),
    ("ws", "Government of Samoa Ministry of Foreign Affairs & Trade", "1995-07-14", None),
    ("ye", "TeleYemen", "1996-08-19", None),
    ("yt", "Association Francaise pour le Nommage Internet en Cooperation (A.F.N.I.C.)", "1997-11-17", None),
    ("za", "ZA Domain Name Authority", "1990-11-07", "2023-06-21"),
    ("zm", "Zambia Information and Communications Technology Authority (ZICTA)", "1994-02-15", None),
    ("zw", "Postal and Telecommunications Regulatory Authority of Zimbabwe (POTRAZ)", "1991-01-29", None),
]

# ============================================================================
# GENERIC (new gTLD programme)
# ============================================================================
NEW_GENERIC_TLDS: list[_Row] = [
    ("academy", "Binky Moon, LLC", "2014-01-09", None),
    ("accountant", "dot Accountant Limited", "2015-04-02", None),
    ("actor", "Dog Beach, LLC", "2014-05-01", None),
    ("agency", "Binky Moon, LLC", "2014-01-23", None),
    ("apartments", "Binky Moon, LLC", "2014-06-05", None),
    ("app", "Charleston Road Registry Inc.", "2015-06-25", "2023-10-17"),
    ("art", "UK Creative Ideas Limited", "2016-06-09", None),
    ("associates", "Binky Moon, LLC", "2014-04-03", None),
    ("auction", "Dog Beach, LLC", "2014-12-11", None),
    ("audio", "XYZ.COM LLC", "2014-03-20", None),
    ("band", "Dog Beach, LLC", "2015-04-30", None),
    ("bar", "Punto 2012 Sociedad Anonima Promotora de Inversion de Capital Variable", "2014-03-06", None),
    ("bargains", "Binky Moon, LLC", "2013-12-12", None),
    ("beer", "Registry Services, LLC", "2014-09-18", None),
    ("best", "BestTLD Pty Ltd", "2014-07-03", None),
    ("bike", "Binky Moon, LLC", "2013-11-14", None),
    ("bingo", "Binky Moon, LLC", "2015-01-22", None),
    ("bio", "Identity Digital Limited", "2014-08-21", None),
    ("black", "Identity Digital Limited", "2014-06-26", None),
    ("blog", "Knock Knock WHOIS There, LLC", "2016-05-12", None),
    ("blue", "Identity Digital Limited", "2014-02-27", None),
    ("boutique", "Binky Moon, LLC", "2014-01-30", None),
    ("build", "Plan Bee LLC", "2014-03-20", None),
    ("builders", "Binky Moon, LLC", "2013-11-21", None),
    ("business", "Binky Moon, LLC", "2014-10-09", None),
    ("buzz", "DOTSTRATEGY CO.", "2014-01-16", None),
    ("cab", "Binky Moon, LLC", "2014-01-16", None),
    ("cafe", "Binky Moon, LLC", "2015-04-16", None),
    ("camera", "Binky Moon, LLC", "2013-11-21", None),
    ("camp", "Binky Moon, LLC", "2013-12-12", None),
    ("capital", "Binky Moon, LLC", "2014-05-29", None),
    ("cards", "Binky Moon, LLC", "2014-03-27", None),
    ("care", "Binky Moon, LLC", "2014-05-01", None),
    ("careers", "Binky Moon, LLC", "2014-01-16", None),
    ("cash", "Binky Moon, LLC", "2014-05-22", None),
    ("catering", "Binky Moon, LLC", "2014-01-16", None),
    ("center", "Binky Moon, LLC", "2013-12-19", None),
    ("chat", "Binky Moon, LLC", "2015-07-23", None),
    ("cheap", "Binky Moon, LLC", "2014-01-30", None),
    ("church", "Binky Moon, LLC", "2014-07-24", None),
    ("city", "Binky Moon, LLC", "2014-05-22", None),
    ("claims", "Binky Moon, LLC", "2014-04-03", None),
    ("cleaning", "Binky Moon, LLC", "2014-01-16", None),
    ("click", "Internet Naming Company LLC", "2014-04-10", None),
    ("clinic", "Binky Moon, LLC", "2014-07-10", None),
    ("clothing", "Binky Moon, LLC", "2013-11-14", None),
    ("cloud", "ARUBA PEC S.p.A.", "2015-09-03", None),
    ("club", "Registry Services, LLC", "2014-04-17", None),
    ("codes", "Binky Moon, LLC", "2014-01-16", None),
    ("coffee", "Binky Moon, LLC", "2014-04-03", None),
    ("college", "XYZ.COM LLC", "2014-08-21", None),
    ("community", "Binky Moon, LLC", "2014-04-03", None),
    ("company", "Binky Moon, LLC", "2014-04-17", None),
    ("computer", "Binky Moon, LLC", "2014-01-16", None),
    ("condos", "Binky Moon, LLC", "2014-01-30", None),
    ("construction", "Binky Moon, LLC", "2013-12-12", None),
    ("consulting", "Dog Beach, LLC", "2014-04-24", None),
    ("contractors", "Binky Moon, LLC", "2014-01-16", None),
    ("cool", "Binky Moon, LLC", "2014-01-30", None),
    ("coupons", "Binky Moon, LLC", "2015-06-25", None),
    ("credit", "Binky Moon, LLC", "2014-05-29", None),
    ("cruises", "Binky Moon, LLC", "2014-03-06", None),
    ("dance", "Dog Beach, LLC", "2014-05-22", None),
    ("dating", "Binky Moon, LLC", "2014-03-06", None),
    ("deals", "Binky Moon, LLC", "2015-01-15", None),
    ("degree", "Dog Beach, LLC", "2014-08-21", None),
    ("delivery", "Binky Moon, LLC", "2015-01-22", None),
    ("democrat", "Dog Beach, LLC", "2014-04-24", None),
    ("dental", "Binky Moon, LLC", "2014-05-29", None),
    ("design", "Registry Services, LLC", "2015-03-26", None),
    ("dev", "Charleston Road Registry Inc.", "2014-12-04", "2023-10-17"),
    ("diamonds", "Binky Moon, LLC", "2013-11-21", None),
    ("digital", "Binky Moon, LLC", "2014-12-04", None),
    ("direct", "Binky Moon, LLC", "2014-09-04", None),
    ("directory", "Binky Moon, LLC", "2014-01-09", None),
    ("discount", "Binky Moon, LLC", "2014-04-03", None),
    ("domains", "Binky Moon, LLC", "2013-12-12", None),
    ("education", "Binky Moon, LLC", "2014-01-16", None),
    ("email", "Binky Moon, LLC", "2014-01-09", None),
    ("energy", "Binky Moon, LLC", "2014-05-01", None),
    ("engineer", "Dog Beach, LLC", "2014-05-01", None),
    ("engineering", "Binky Moon, LLC", "2014-04-24", None),
    ("enterprises", "Binky Moon, LLC", "2013-12-19", None),
    ("equipment", "Binky Moon, LLC", "2013-11-21", None),
    ("estate", "Binky Moon, LLC", "2013-11-14", None),
    ("events", "Binky Moon, LLC", "2014-03-06", None),
    ("exchange", "Binky Moon, LLC", "2014-04-17", None),
    ("expert", "Binky Moon, LLC", "2014-01-09", None),
    ("exposed", "Binky Moon, LLC", "2014-01-30", None),
    ("express", "Binky Moon, LLC", "2015-02-26", None),
    ("fail", "Binky Moon, LLC", "2014-04-24", None),
    ("farm", "Binky Moon, LLC", "2014-01-16", None),
    ("fashion", "Registry Services, LLC", "2015-03-12", None),
    ("finance", "Binky Moon, LLC", "2014-05-29", None),
    ("financial", "Binky Moon, LLC", "2014-05-29", None),
    ("fish", "Binky Moon, LLC", "2014-03-06", None),
    ("fit", "Registry Services, LLC", "2015-03-12", None),
    ("fitness", "Binky Moon, LLC", "2014-07-24", None),
    ("flights", "Binky Moon, LLC", "2014-01-30", None),
    ("florist", "Binky Moon, LLC", "2014-01-16", None),
    ("football", "Binky Moon, LLC", "2015-01-08", None),
    ("foundation", "Public Interest Registry (PIR)", "2014-03-20", None),
    ("fun", "Radix FZC DMCC", "2016-03-31", None),
    ("fund", "Binky Moon, LLC", "2014-05-29", None),
    ("furniture", "Binky Moon, LLC", "2014-04-24", None),
    ("futbol", "Dog Beach, LLC", "2014-03-06", None),
    ("gallery", "Binky Moon, LLC", "2013-12-12", None),
    ("games", "Dog Beach, LLC", "2015-01-29", None),
    ("garden", "Registry Services, LLC", "2015-05-21", None),
    ("gift", "DotGift, LLC", "2014-06-26", None),
    ("gifts", "Binky Moon, LLC", "2014-06-26", None),
    ("glass", "Binky Moon, LLC", "2013-11-21", None),
    ("global", "Identity Digital Limited", "2014-05-29", None),
    ("gold", "Binky Moon, LLC", "2015-01-22", None),
    ("golf", "Binky Moon, LLC", "2015-04-16", None),
    ("google", "Charleston Road Registry Inc.", "2014-09-04", None),
    ("graphics", "Binky Moon, LLC", "2013-11-14", None),
    ("gratis", "Binky Moon, LLC", "2014-04-17", None),
    ("green", "Identity Digital Limited", "2014-07-03", None),
    ("gripe", "Binky Moon, LLC", "2014-04-24", None),
    ("group", "Binky Moon, LLC", "2015-01-08", None),
    ("guide", "Binky Moon, LLC", "2014-06-05", None),
    ("guitars", "XYZ.COM LLC", "2014-03-20", None),
    ("guru", "Binky Moon, LLC", "2013-11-14", None),
    ("health", "Registry Services, LLC", "2016-03-31", None),
    ("help", "Innovation Service Ltd", "2014-07-31", None),
    ("hockey", "Binky Moon, LLC", "2015-06-25", None),
    ("holdings", "Binky Moon, LLC", "2013-11-14", None),
    ("holiday", "Binky Moon, LLC", "2014-01-30", None),
    ("host", "Radix FZC DMCC", "2014-06-26", None),
    ("house", "Binky Moon, LLC", "2014-01-30", None),
    ("how", "Charleston Road Registry Inc.", "2014-05-01", None),
    ("immo", "Binky Moon, LLC", "2014-08-07", None),
    ("industries", "Binky Moon, LLC", "2014-01-30", None),
    ("ink", "Registry Services, LLC", "2014-01-16", None),
    ("institute", "Binky Moon, LLC", "2014-01-30", None),
    ("insure", "Binky Moon, LLC", "2014-05-29", None),
    ("international", "Binky Moon, LLC", "2014-01-30", None),
    ("investments", "Binky Moon, LLC", "2014-05-29", None),
    ("jewelry", "Binky Moon, LLC", "2015-01-22", None),
    ("kitchen", "Binky Moon, LLC", "2013-12-19", None),
    ("land", "Binky Moon, LLC", "2013-12-12", None),
    ("lawyer", "Dog Beach, LLC", "2014-08-14", None),
    ("lease", "Binky Moon, LLC", "2014-05-29", None),
    ("legal", "Binky Moon, LLC", "2015-03-05", None),
    ("life", "Binky Moon, LLC", "2014-08-07", None),
    ("lighting", "Binky Moon, LLC", "2013-11-14", None),
    ("limited", "Binky Moon, LLC", "2014-07-10", None),
    ("limo", "Binky Moon, LLC", "2014-03-06", None),
    ("link", "Nova Registry Ltd", "2014-02-13", None),
    ("live", "Dog Beach, LLC", "2015-06-25", None),
    ("loans", "Binky Moon, LLC", "2014-05-29", None),
    ("ltd", "Binky Moon, LLC", "2015-06-25", None),
    ("management", "Binky Moon, LLC", "2013-12-19", None),
    ("market", "Dog Beach, LLC", "2014-10-16", None),
    ("marketing", "Binky Moon, LLC", "2014-01-09", None),
    ("media", "Binky Moon, LLC", "2014-07-24", None),
    ("menu", "Dot Menu Registry, LLC", "2013-12-19", None),
    ("moda", "Dog Beach, LLC", "2014-04-03", None),
    ("money", "Binky Moon, LLC", "2015-04-09", None),
    ("mortgage", "Dog Beach, LLC", "2014-10-09", None),
    ("movie", "Binky Moon, LLC", "2016-01-28", None),
    ("network", "Binky Moon, LLC", "2015-01-15", None),
    ("news", "Dog Beach, LLC", "2015-01-22", None),
    ("ninja", "Dog Beach, LLC", "2014-02-06", None),
    ("one", "One.com A/S", "2015-06-18", None),
    ("online", "Radix FZC DMCC", "2015-06-18", None),
    ("page", "Charleston Road Registry Inc.", "2015-05-21", None),
    ("partners", "Binky Moon, LLC", "2014-01-30", None),
    ("parts", "Binky Moon, LLC", "2014-01-30", None),
    ("party", "Blue Sky Registry Limited", "2015-03-12", None),
    ("photo", "Registry Services, LLC", "2014-03-20", None),
    ("photography", "Binky Moon, LLC", "2013-11-14", None),
    ("photos", "Binky Moon, LLC", "2013-12-19", None),
    ("pics", "XYZ.COM LLC", "2014-03-20", None),
    ("pictures", "Binky Moon, LLC", "2014-04-24", None),
    ("pizza", "Binky Moon, LLC", "2014-07-24", None),
    ("place", "Binky Moon, LLC", "2014-07-03", None),
    ("plumbing", "Binky Moon, LLC", "2013-11-14", None),
    ("plus", "Binky Moon, LLC", "2015-04-23", None),
    ("press", "Radix FZC DMCC", "2014-05-29", None),
    ("productions", "Binky Moon, LLC", "2014-01-30", None),
    ("properties", "Binky Moon, LLC", "2013-12-19", None),
    ("pub", "Dog Beach, LLC", "2014-04-03", None),
    ("recipes", "Binky Moon, LLC", "2014-01-16", None),
    ("red", "Identity Digital Limited", "2014-03-06", None),
    ("rentals", "Binky Moon, LLC", "2013-12-12", None),
    ("repair", "Binky Moon, LLC", "2013-12-19", None),
    ("report", "Binky Moon, LLC", "2014-01-30", None),
    ("restaurant", "Binky Moon, LLC", "2014-07-24", None),
    ("reviews", "Dog Beach, LLC", "2014-04-24", None),
    ("rocks", "Dog Beach, LLC", "2014-03-06", None),
    ("run", "Binky Moon, LLC", "2015-11-05", None),
    ("sale", "Dog Beach, LLC", "2015-01-15", None),
    ("salon", "Binky Moon, LLC", "2016-01-21", None),
    ("school", "Binky Moon, LLC", "2014-08-28", None),
    ("science", "dot Science Limited", "2015-01-08", None),
    ("services", "Binky Moon, LLC", "2014-05-01", None),
    ("shoes", "Binky Moon, LLC", "2013-11-21", None),
    ("shop", "GMO Registry, Inc.", "2016-08-18", None),
    ("show", "Binky Moon, LLC", "2015-04-16", None),
    ("singles", "Binky Moon, LLC", "2013-11-14", None),
    ("site", "Radix FZC DMCC", "2015-03-26", None),
    ("soccer", "Binky Moon, LLC", "2016-01-21", None),
    ("social", "Dog Beach, LLC", "2014-04-17", None),
    ("software", "Dog Beach, LLC", "2014-06-12", None),
    ("solar", "Binky Moon, LLC", "2013-12-19", None),
    ("solutions", "Binky Moon, LLC", "2013-12-19", None),
    ("space", "Radix FZC DMCC", "2014-06-05", None),
    ("store", "Radix FZC DMCC", "2016-02-18", None),
    ("studio", "Dog Beach, LLC", "2015-11-05", None),
    ("style", "Binky Moon, LLC", "2015-03-12", None),
    ("supplies", "Binky Moon, LLC", "2014-03-06", None),
    ("supply", "Binky Moon, LLC", "2014-03-06", None),
    ("support", "Binky Moon, LLC", "2013-12-19", None),
    ("surgery", "Binky Moon, LLC", "2014-05-29", None),
    ("systems", "Binky Moon, LLC", "2013-12-19", None),
    ("tax", "Binky Moon, LLC", "2014-05-29", None),
    ("team", "Binky Moon, LLC", "2015-11-05", None),
    ("tech", "Radix FZC DMCC", "2015-03-26", "2023-11-02"),
    ("technology", "Binky Moon, LLC", "2013-12-19", None),
    ("tennis", "Binky Moon, LLC", "2016-01-21", None),
    ("theater", "Binky Moon, LLC", "2015-04-16", None),
    ("tips", "Binky Moon, LLC", "2013-11-14", None),
    ("today", "Binky Moon, LLC", "2014-01-23", None),
    ("tools", "Binky Moon, LLC", "2014-01-09", None),
    ("top", ".TOP Registry", "2014-08-07", None),
    ("tours", "Binky Moon, LLC", "2015-02-05", None),
    ("town", "Binky Moon, LLC", "2014-04-03", None),
    ("toys", "Binky Moon, LLC", "2014-06-05", None),
    ("training", "Binky Moon, LLC", "2014-01-16", None),
    ("university", "Binky Moon, LLC", "2014-06-05", None),
    ("vacations", "Binky Moon, LLC", "2013-12-12", None),
    ("ventures", "Binky Moon, LLC", "2013-11-14", None),
    ("video", "Dog Beach, LLC", "2015-01-22", None),
    ("villas", "Binky Moon, LLC", "2014-05-22", None),
    ("vip", "Registry Services, LLC", "2015-10-15", None),
    ("vision", "Binky Moon, LLC", "2014-01-30", None),
    ("watch", "Binky Moon, LLC", "2014-04-24", None),
    ("website", "Radix FZC DMCC", "2014-06-05", None),
    ("wiki", "Registry Services, LLC", "2014-02-06", None),
    ("win", "First Registry Limited", "2015-05-14", None),
    ("wine", "Binky Moon, LLC", "2015-07-09", None),
    ("work", "Registry Services, LLC", "2014-06-26", None),
    ("works", "Binky Moon, LLC", "2014-04-24", None),
    ("world", "Binky Moon, LLC", "2014-10-02", None),
    ("wtf", "Binky Moon, LLC", "2014-04-24", None),
    ("xyz", "XYZ.COM LLC", "2014-02-20", "2023-06-27"),
    ("yoga", "Registry Services, LLC", "2015-05-14", None),
    ("zone", "Binky Moon, LLC", "2014-01-09", None),
]

TLD_ROWS: tuple[tuple[TLDType, list[_Row]], ...] = (
    (TLDType.INFRASTRUCTURE, INFRASTRUCTURE_TLDS),
    (TLDType.GENERIC, LEGACY_GENERIC_TLDS),
    (TLDType.GENERIC_RESTRICTED, GENERIC_RESTRICTED_TLDS),
    (TLDType.SPONSORED, SPONSORED_TLDS),
    (TLDType.COUNTRY_CODE, COUNTRY_CODE_TLDS),
    (TLDType.GENERIC, NEW_GENERIC_TLDS),
)
