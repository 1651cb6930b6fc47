import hashlib

# ----------- Location query presets -----------
PRESETS = {
    "panama": {
        "title": "Panama",
        "include": ["panama", "panamá", "tocumen"],
    },
    "cyprus": {
        "title": "Cyprus",
        "include": ["cyprus", "nicosia", "lefkosia", "limassol", "lemessos", "larnaka", "paphos"],
    },
    "austria": {
        "title": "Austria",
        "include": ["austria", "österreich", "vienna", "wien", "linz", "salzburg", "graz", "innsbruck", "klagenfurt", "wels", "dornbirn"],
    },
    "armenia": {
        "title": "Armenia",
        "include": ["armenia", "yerevan", "gyumri", "vanadzor", "vagharshapat", "abovyan", "kapan", "hrazdan", "armavir", "artashat", "ijevan", "gavar", "goris", "dilijan", "stepanakert", "martuni", "sisian", "alaverdi", "stepanavan", "berd"],
    },
    "oman": {
        "title": "Oman",
        "include": ["oman", "ad+dakhiliyah", "ad+dhahirah", "batinah+north", "batinah+south", "al+buraymi", "al+wusta", "ash+sharqiyah+north", "ash+sharqiyah+south", "dhofar", "muscat", "musandam"],
    },
    "bahrain": {
        "title": "Bahrain",
        "include": ["bahrain", "manama", "muharraq", "riffa", "hamad+town", "isa+town"],
    },
    "finland": {
        "title": "Finland",
        "include": ["finland", "suomi", "helsinki", "tampere", "oulu", "espoo", "vantaa", "turku", "rovaniemi", "jyväskylä", "lahti", "kuopio", "pori", "lappeenranta", "vaasa"],
    },
    "sweden": {
        "title": "Sweden",
        "include": ["sweden", "sverige", "stockholm", "malmö", "uppsala", "göteborg", "gothenburg"],
    },
    "suriname": {
        "title": "Suriname",
        "include": ["suriname", "paramaribo"],
    },
    "norway": {
        "title": "Norway",
        "include": ["norway", "norge", "oslo", "bergen", "trondheim", "stavanger", "drammen", "fredrikstad", "kristiansand", "tromsø", "sandnes", "ålesund", "bodø", "skien", "haugesund", "tønsberg", "arendal", "porsgrunn", "hamar", "larvik", "moss", "sandefjord", "halden", "harstad", "lillehammer", "molde", "gjøvik", "mo+i+rana", "steinkjer", "alta", "lommedalen"],
    },
    "germany": {
        "title": "Germany",
        "include": ["germany", "deutschland", "berlin", "frankfurt", "munich", "münchen", "hamburg", "cologne", "köln"],
    },
    "netherlands": {
        "title": "Netherlands",
        "include": ["netherlands", "nederland", "amsterdam", "rotterdam", "hague", "utrecht", "holland", "delft"],
    },
    "ukraine": {
        "title": "Ukraine",
        "include": ["ukraine", "kiev", "kyiv", "kharkiv", "dnipro", "odesa", "donetsk", "zaporizhia"],
    },
    "japan": {
        "title": "Japan",
        "include": ["japan", "tokyo", "yokohama", "osaka", "nagoya", "sapporo", "kobe", "kyoto", "fukuoka", "kawasaki", "saitama", "hiroshima", "sendai"],
    },
    "russia": {
        "title": "Russia",
        "include": ["russia", "moscow", "saint+petersburg", "novosibirsk", "yekaterinburg", "nizhny+novgorod", "samara", "omsk", "kazan", "chelyabinsk", "rostov-on-don", "ufa", "volgograd"],
    },
    "estonia": {
        "title": "Estonia",
        "include": ["estonia", "eesti", "tallinn", "tartu", "narva", "pärnu", "rakvere", "kohtla-järve", "viljandi", "maardu", "sillamäe"],
    },
    "denmark": {
        "title": "Denmark",
        "include": ["denmark", "danmark", "copenhagen", "aarhus", "odense", "aalborg"],
    },
    "portugal": {
        "title": "Portugal",
        "include": ["portugal", "lisbon", "lisboa", "braga", "porto", "aveiro", "coimbra", "funchal", "madeira"],
    },
    "france": {
        "title": "France",
        "include": ["france", "paris", "marseille", "lyon", "toulouse", "nice", "nantes", "strasbourg", "montpellier", "bordeaux", "lille", "rennes", "reims", "rouen", "toulon", "le+havre", "grenoble", "dijon", "le+mans", "brest,france", "tours"],
    },
    "spain": {
        "title": "Spain",
        "include": ["spain", "españa", "madrid", "barcelona", "valencia", "seville", "sevilla", "zaragoza", "malaga", "murcia", "palma", "bilbao", "alicante", "cordoba"],
    },
    "italy": {
        "title": "Italy",
        "include": ["italy", "italia", "rome", "roma", "milan", "naples", "napoli", "turin", "torino", "palermo", "genoa", "genova", "bologna", "florence", "firenze", "bari", "catania", "venice", "verona"],
    },
    "uk": {
        "title": "United Kingdom",
        "include": ["uk", "england", "scotland", "wales", "northern+ireland", "london", "birmingham", "leeds", "glasgow", "sheffield", "bradford", "manchester", "edinburgh", "liverpool", "bristol", "cardiff", "belfast", "leicester", "wakefield", "coventry", "nottingham", "newcastle"],
    },
    "croatia": {
        "title": "Croatia",
        "include": ["croatia", "hrvatska", "zagreb", "split", "rijeka", "osijek", "zadar", "pula"],
    },
    "worldwide": {
        "title": "Worldwide",
        "include": [],
    },
    "china": {
        "title": "China",
        "include": ["china", "中国", "guangzhou", "shanghai", "beijing", "hangzhou"],
    },
    "india": {
        "title": "India",
        "include": ["india", "mumbai", "delhi", "bangalore", "hyderabad", "ahmedabad", "chennai", "kolkata", "jaipur", "pune", "gurgaon", "noida"],
    },
    "israel": {
        "title": "Israel",
        "include": ["israel", "tel+aviv", "jerusalem", "beer+sheva", "beersheva", "netanya", "ramat+gan", "haifa", "herzliya", "rishon"],
    },
    "indonesia": {
        "title": "Indonesia",
        "include": ["indonesia", "jakarta", "surabaya", "bandung", "medan", "bekasi", "semarang", "tangerang", "depok", "makassar", "palembang"],
    },
    "pakistan": {
        "title": "Pakistan",
        "include": ["pakistan", "karachi", "lahore", "faisalabad", "rawalpindi", "peshawar", "islamabad"],
    },
    "brazil": {
        "title": "Brazil",
        "include": ["brazil", "brasil", "são+paulo", "brasília", "salvador", "fortaleza", "belém", "belo+horizonte", "manaus", "curitiba", "recife", "rio+de+janeiro", "maceió", "aracaju", "porto+alegre", "florianópolis", "acre", "alagoas", "amapá", "amazonas", "bahia", "ceará", "distrito+federal", "espírito+santo", "goiás", "maranhão", "mato+grosso", "mato+grosso+do+sul", "minas+gerais", "pará", "paraíba", "paraná", "pernambuco", "piauí", "rio+grande+do+norte", "rio+grande+do+sul", "rondônia", "roraima", "santa+catarina", "sergipe", "tocantins"],
    },
    "nigeria": {
        "title": "Nigeria",
        "include": ["nigeria", "lagos", "kano", "ibadan", "benin+city", "port+harcourt", "jos", "ilorin", "kaduna"],
    },
    "bangladesh": {
        "title": "Bangladesh",
        "include": ["bangladesh", "dhaka", "chittagong", "khulna", "rajshahi", "barisal", "sylhet", "rangpur", "comilla", "gazipur"],
    },
    "mexico": {
        "title": "Mexico",
        "include": ["mexico", "mexico+city", "guadalajara", "puebla", "tijuana", "mexicali", "monterrey", "hermosillo", "zapopan", "ciudad+juarez", "chihuahua", "aguascalientes", "mx"],
    },
    "philippines": {
        "title": "Philippines",
        "include": ["philippines", "pilipinas", "quezon", "manila", "davao", "caloocan", "cebu", "zamboanga", "bohol", "pasig", "bacolod", "makati", "baguio", "cavite"],
    },
    "luxembourg": {
        "title": "Luxembourg",
        "include": ["luxembourg", "esch-sur-alzette", "differdange", "dudelange", "ettelbruck", "diekirch", "wiltz", "echternach", "rumelange", "grevenmacher", "bertrange", "mamer", "capellen", "strassen", "diekirch"],
    },
    "egypt": {
        "title": "Egypt",
        "include": ["egypt", "cairo", "alexandria", "giza", "port+said", "suez", "luxor", "el+mahalla", "asyut", "al+mansurah", "tanda"],
        "exclude": [",+VA", "Virginia", ",+LA", "Louisiana"],
    },
    "ethiopia": {
        "title": "Ethiopia",
        "include": ["ethiopia", "addis+ababa", "gondar", "adama", "hawassa", "bahir+dar"],
    },
    "vietnam": {
        "title": "Vietnam",
        "include": ["vietnam", "viet+nam", "ho+chi+minh", "hanoi", "ha+noi", "hai+phong", "da+nang", "can+tho", "bien+hoa", "nha+trang", "vinh"],
    },
    "iran": {
        "title": "Iran",
        "include": ["iran", "tehran", "mashhad", "isfahan", "esfahan", "karaj", "shiraz", "tabriz", "qom", "ahvaz", "ahwaz", "kermanshah", "urmia", "rasht", "kerman"],
    },
    "congo kinshasa": {
        "title": "Democratic Republic of the Congo",
        "include": ["congo+kinshasa", "drc", "cod", "kinshasa", "lubumbashi", "bukavu", "kananga", "goma", "mbuji+mayi", "likasi", "kolwezi", "kalemie", "uvira", "matadi", "moba", "kamina", "kabalo", "fungurume"],
    },
    "congo brazzaville": {
        "title": "Republic of the Congo",
        "include": ["congo+brazza", "cog", "brazzaville", "djambala", "pointe+noire", "sibiti", "owando", "madingou", "loango", "kinkala", "impfondo", "dolisie"],
    },
    "turkey": {
        "title": "Turkey",
        "include": ["turkey", "turkiye", "istanbul", "ankara", "izmir", "bursa", "adana", "gaziantep", "konya", "antalya", "kayseri", "mersin", "eskisehir", "samsun", "denizli", "malatya"],
    },
    "thailand": {
        "title": "Thailand",
        "include": ["thailand", "bangkok", "nonthaburi", "nakhon", "phuket", "pattaya", "chiang+mai"],
    },
    "south africa": {
        "title": "South Africa",
        "include": ["south+africa", "south+africa", "johannesburg", "cape+town", "rsa", "durban", "port+elizabeth", "pretoria", "nelspruit"],
    },
    "myanmar": {
        "title": "Myanmar",
        "include": ["myanmar", "burma", "yangon", "rangoon", "mandalay", "nay+pyi+taw", "taunggyi", "bago", "mawlamyine"],
    },
    "tanzania": {
        "title": "Tanzania",
        "include": ["tanzania", "dar+es+salaam", "mwanza", "arusha", "dodoma", "mbeya", "morogoro", "tanga", "kilimanjaro"],
    },
    "south korea": {
        "title": "Republic of Korea",
        "include": ["south+korea", "ROK", "korea", "seoul", "busan", "incheon", "daegu", "daejeon", "gwangju", "대한민국", "서울", "서울시"],
    },
    "colombia": {
        "title": "Colombia",
        "include": ["colombia", "bogota", "medellin", "cali", "barranquilla", "cartagena", "cucuta", "bucaramanga", "ibague", "soledad", "pereira", "santa+marta"],
    },
    "kenya": {
        "title": "Kenya",
        "include": ["kenya", "nairobi", "mombasa", "kisumu", "nakuru", "eldoret", "kisii", "nyeri", "machakos", "Embu"],
    },
    "argentina": {
        "title": "Argentina",
        "include": ["argentina", "buenos+aires", "cordoba", "rosario", "mendoza", "la+plata", "tucuman", "mar+del+plata", "salta", "resistencia"],
    },
    "algeria": {
        "title": "Algeria",
        "include": ["algeria", "algiers", "oran", "constantine", "annaba", "blida", "batna", "djelfa", "setif", "sidi+bel+abbes", "biskra", "tiaret", "relizane", "mostaganem", "tlemcen", "chlef", "jijel"],
    },
    "sudan": {
        "title": "Sudan",
        "include": ["sudan", "khartoum", "omdurman"],
    },
    "poland": {
        "title": "Poland",
        "include": ["poland", "polska", "warsaw", "krakow", "lodz", "wroclaw", "poznan", "gdansk", "szczecin", "bydgoszcz", "lublin", "katowice", "bialystok"],
    },
    "canada": {
        "title": "Canada",
        "include": ["canada", "ottawa", "edmonton", "winnipeg", "vancouver", "toronto", "quebec", "montreal", "mississauga", "calgary"],
    },
    "australia": {
        "title": "Australia",
        "include": ["australia", "sydney", "melbourne", "brisbane", "perth", "adelaide", "canberra", "hobart"],
    },
    "new zealand": {
        "title": "New Zealand",
        "include": ["new+zealand", "auckland", "wellington", "christchurch", "hamilton", "tauranga", "napier-hastings", "dunedin", "palmerston+north", "nelson", "rotorua", "whangarei", "new+plymouth", "invercargill", "whanganui", "gisborne"],
    },
    "belgium": {
        "title": "Belgium",
        "include": ["belgium", "antwerp", "ghent", "charleroi", "liege", "brussels", "belgique"],
    },
    "greece": {
        "title": "Greece",
        "include": ["greece", "Ελλάδα", "athens", "thessaloniki", "patras", "heraklion", "larissa", "volos", "rhodes", "ioannina", "chania", "crete"],
        "exclude": ["GA"],
    },
    "peru": {
        "title": "Peru",
        "include": ["peru", "lima", "cusco", "cuzco", "ica", "arequipa", "trujillo", "chiclayo", "huancayo", "piura", "chimbote", "iquitos", "juliaca", "cajamarca"],
    },
    "hungary": {
        "title": "Hungary",
        "include": ["hungary", "magyarország", "budapest", "szeged", "miskolc"],
    },
    "albania": {
        "title": "Albania",
        "include": ["albania", "tirana", "durres", "vlore", "elbasan", "shkoder"],
    },
    "uganda": {
        "title": "Uganda",
        "include": ["uganda", "kampala", "mbarara", "mukono", "jinja", "arua", "gulu", "masaka"],
    },
    "zambia": {
        "title": "Zambia",
        "include": ["zambia", "lusaka", "kitwe", "ndola"],
    },
    "sri lanka": {
        "title": "Sri Lanka",
        "include": ["sri+lanka", "balangoda", "ratnapura", "colombo", "moratuwa", "negombo", "galle", "jaffna"],
    },
    "singapore": {
        "title": "Singapore",
        "include": ["singapore"],
    },
    "latvia": {
        "title": "Latvia",
        "include": ["latvia", "latvija", "riga", "rīga", "kuldiga", "kuldīga", "ventspils", "liepaja", "liepāja", "daugavpils", "jelgava", "jurmala", "jūrmala"],
    },
    "romania": {
        "title": "Romania",
        "include": ["romania", "bucharest", "cluj", "iasi", "timisoara", "craiova", "brasov", "sibiu", "constanta", "oradea", "galati", "ploesti", "pitesti", "arad", "bacau"],
    },
    "moldova": {
        "title": "Moldova",
        "include": ["moldova", "chisinau", "tiraspol", "balti", "bender", "ribnita", "cahul", "ungheni", "soroca", "orhei", "dubasari"],
    },
    "belarus": {
        "title": "Belarus",
        "include": ["belarus", "minsk", "brest,belarus", "grodno", "gomel", "vitebsk", "mogilev", "slutsk", "borisov", "pinsk", "baranovichi", "bobruisk", "soligorsk"],
    },
    "malta": {
        "title": "Malta",
        "include": ["malta", "birgu", "bormla", "mdina", "qormi", "senglea", "siġġiewi", "valletta", "zabbar", "zebbuġ", "zejtun"],
    },
    "rwanda": {
        "title": "Rwanda",
        "include": ["rwanda", "kigali", "butare", "muhanga", "ruhengeri", "gisenyi", "nyarugenge", "huye", "musanze", "rubavu", "rwamagana", "kirehe", "kibungo", "ngoma", "nyagatare", "gicumbi", "nyabihu", "kibuye", "karongi", "rusizi", "nyamasheke", "ruhango", "nyanza", "kamonyi", "kicukiro", "gasabo"],
    },
    "saudi arabia": {
        "title": "Saudi Arabia",
        "include": ["Saudi", "KSA", "Riyadh", "Mecca", "Jeddah", "Dammam"],
    },
    "morocco": {
        "title": "Morocco",
        "include": ["morocco", "casablanca", "fez", "tangier", "marrakesh", "salé", "meknes", "rabat", "oujda", "kenitra", "agadir", "tetouan", "temara", "safi", "mohammedia", "khouribga", "el+jadida"],
    },
    "uzbekistan": {
        "title": "Uzbekistan",
        "include": ["uzbekistan", "tashkent", "namangan", "samarkand", "andijan", "nukus", "bukhara", "qarshi", "fergana"],
    },
    "malaysia": {
        "title": "Malaysia",
        "include": ["malaysia", "kuala+lumpur", "kajang", "klang", "subang", "penang", "ipoh", "selangor", "melaka", "johor", "sabah", "johor+bahru", "shah+alam", "iskandar+puteri"],
    },
    "afghanistan": {
        "title": "Afghanistan",
        "include": ["afghanistan", "kabul", "kandahar", "herat", "mazar-e-sharif", "jalalabad", "ghazni", "nangarhar", "khost", "zabul", "helmand", "parwan", "farah", "kunar", "wardak", "baghlan", "kunduz", "takhar", "paktia", "paktika"],
    },
    "venezuela": {
        "title": "Venezuela",
        "include": ["venezuela", "caracas", "maracaibo", "barquisimeto", "guayana", "maturín", "zulia", "bolivar"],
    },
    "ghana": {
        "title": "Ghana",
        "include": ["ghana", "accra", "kumasi", "sekondi", "ashaiman", "sunyani", "tamale", "tema"],
    },
    "angola": {
        "title": "Angola",
        "include": ["angola", "luanda", "huambo", "lobito", "benguela"],
    },
    "nepal": {
        "title": "Nepal",
        "include": ["nepal", "kathmandu", "pokhara", "lalitpur", "bharatpur", "birgunj", "biratnagar", "janakpur", "ghorahi"],
    },
    "yemen": {
        "title": "Yemen",
        "include": ["yemen", "sana'a", "taiz", "aden", "mukalla", "ibb"],
    },
    "mozambique": {
        "title": "Mozambique",
        "include": ["mozambique", "maputo", "matola", "nampula", "beira", "sofala", "chimoio", "tete", "quelimane"],
    },
    "ivory coast": {
        "title": "Ivory Coast",
        "include": ["ivory", "abidjan", "bouaké", "daloa", "yamoussoukro"],
    },
    "cameroon": {
        "title": "Cameroon",
        "include": ["cameroon", "Douala", "Yaoundé", "Bafoussam", "Bamenda", "Garoua", "Maroua", "Ngaoundéré", "Kumba", "Nkongsamba", "Buea"],
    },
    "taiwan": {
        "title": "Taiwan",
        "include": ["taiwan", "Taichung", "Kaohsiung", "Taipei", "Taoyuan", "Tainan", "Hsinchu", "Keelung", "Chiayi", "Changhua"],
    },
    "niger": {
        "title": "Niger",
        "include": ["niger", "Niamey", "Maradi", "Zinder", "Tahoua", "Agadez", "Arlit", "Birni-N'Konni", "Dosso", "Gaya", "Tessaoua"],
    },
    "burkina faso": {
        "title": "Burkina Faso",
        "include": ["burkina+faso", "Ouagadougou", "Bobo-Dioulasso", "Koudougou", "Banfora", "Ouahigouya", "Pouytenga", "Kaya", "Tenkodogo", "Fada+N'gourma", "Houndé"],
    },
    "mali": {
        "title": "Mali",
        "include": ["mali", "bamako", "sikasso", "kalabancoro", "koutiala", "ségou", "kayes", "kati", "mopti", "niono"],
    },
    "malawi": {
        "title": "Malawi",
        "include": ["malawi", "Lilongwe", "Blantyre", "Mzuzu", "Zomba", "Karonga", "Kasungu", "Mangochi", "Salima", "Liwonde", "Balaka"],
    },
    "chile": {
        "title": "Chile",
        "include": ["chile", "Santiago", "Valparaíso", "Concepción", "La+Serena", "Antofagasta", "Temuco", "Rancagua", "Talca", "Arica", "Chillán"],
    },
    "kazakhstan": {
        "title": "Kazakhstan",
        "include": ["kazakhstan", "Almaty", "Shymkent", "Karagandy", "Taraz", "Nur-Sultan", "Pavlodar", "Oskemen", "Semey"],
    },
    "guatemala": {
        "title": "Guatemala",
        "include": ["Guatemala", "mixco", "villa+nueva", "petapa", "Quetzaltenango"],
    },
    "ecuador": {
        "title": "Ecuador",
        "include": ["ecuador", "Guayaquil", "Quito", "Cuenca", "Machala"],
    },
    "syria": {
        "title": "Syria",
        "include": ["syria", "سوريا", "damascus", "hama", "aleppo", "homs", "rif+dimashq", "tartus", "latakia", "idlib", "raqqa", "daraa", "alhasakah", "dierezzor", "quneitra", "alsuwayda"],
    },
    "cambodia": {
        "title": "Cambodia",
        "include": ["cambodia", "phnom", "battambang", "siem+reap", "kampong"],
    },
    "senegal": {
        "title": "Senegal",
        "include": ["senegal", "dakar", "touba", "thies", "rufisque", "kaolack", "ziguinchor", "tambacounda", "kaffrine", "diourbel"],
    },
    "chad": {
        "title": "Chad",
        "include": ["chad", "tchad", "n'djamena", "moundou"],
    },
    "somalia": {
        "title": "Somalia",
        "include": ["somalia", "mogadishu", "hargeisa", "bosaso", "borama", "garowe", "kismayo"],
    },
    "zimbabwe": {
        "title": "Zimbabwe",
        "include": ["zimbabwe", "harare", "bulawayo", "mutare", "gweru", "kwekwe"],
    },
    "guinea": {
        "title": "Guinea",
        "include": ["conakry"],
    },
    "benin": {
        "title": "Benin",
        "include": ["benin", "cotonou", "porto-novo", "abomey"],
    },
    "haiti": {
        "title": "Haiti",
        "include": ["haiti", "port-au-prince", "cap-haitien", "carrefour", "delmas", "petion-ville"],
    },
    "cuba": {
        "title": "Cuba",
        "include": ["cuba", "havana", "santiago+de+cuba", "camaguey", "holguin", "guantanamo", "bayamo"],
    },
    "bolivia": {
        "title": "Bolivia",
        "include": ["bolivia", "santa+cruz+de+la+sierra", "el+alto", "la+paz", "cochabamba", "oruro", "sucre"],
    },
    "tunisia": {
        "title": "Tunisia",
        "include": ["tunisia", "tunis", "sfax", "sousse", "kairouan", "ariana", "gabes", "bizerte"],
    },
    "south sudan": {
        "title": "South Sudan",
        "include": ["south sudan", "juba"],
    },
    "burundi": {
        "title": "Burundi",
        "include": ["burundi", "bujumbura", "gitega"],
    },
    "dominican republic": {
        "title": "Dominican Republic",
        "include": ["dominican+republic", "republica+dominicana", "santo+domingo", "la+vega", "macoris"],
    },
    "czech republic": {
        "title": "Czech Republic",
        "include": ["czech", "czechia", "ceska", "prague", "budejovice", "plzen", "karlovy", "ostrava", "brno"],
    },
    "jordan": {
        "title": "Jordan",
        "include": ["jordan", "amman", "zarqa", "irbid"],
    },
    "azerbaijan": {
        "title": "Azerbaijan",
        "include": ["azerbaijan", "baku", "sumqayit", "ganja", "lankaran"],
    },
    "uae": {
        "title": "United Arab Emirates",
        "include": ["uae", "emirates", "dubai", "abu+dhabi", "sharjah", "al+ain", "ajman"],
    },
    "honduras": {
        "title": "Honduras",
        "include": ["honduras", "tegucigalpa", "san+pedro+sula", "choloma", "la+ceiba", "el+progreso", "choluteca", "comayagua"],
    },
    "tajikistan": {
        "title": "Tajikistan",
        "include": ["tajikistan", "dushanbe", "khujand"],
    },
    "papua new guinea": {
        "title": "Papua New Guinea",
        "include": ["papua+new+guinea", "port+moresby", "lae"],
    },
    "serbia": {
        "title": "Serbia",
        "include": ["serbia", "belgrade", "novi+sad", "nis", "kragujevac", "subotica", "zrenjanin", "pancevo", "cacak", "novi+pazar", "kraljevo", "smederevo"],
    },
    "switzerland": {
        "title": "Switzerland",
        "include": ["switzerland", "zurich", "zürich", "geneva", "basel", "lausanne", "bern", "winterthur", "lucerne", "gallen", "lugano", "biel", "thun"],
    },
    "togo": {
        "title": "Togo",
        "include": ["togo", "lome"],
    },
    "sierra leone": {
        "title": "Sierra Leone",
        "include": ["sierra+leone", "freetown", "makeni", "koidu"],
    },
    "ireland": {
        "title": "Ireland",
        "include": ["ireland", "dublin", "cork", "limerick", "galway", "waterford+ireland", "drogheda", "dundalk"],
    },
    "hong kong": {
        "title": "Hong Kong",
        "include": ["hong+kong", "香港", "kowloon", "九龍"],
    },
    "macau": {
        "title": "Macau",
        "include": ["macau", "macao"],
    },
    "el salvador": {
        "title": "El Salvador",
        "include": ["el+salvador"],
    },
    "kyrgyzstan": {
        "title": "Kyrgyzstan",
        "include": ["kyrgyzstan", "bishkek", "osh", "jalal-abad", "karakol", "tokmok"],
    },
    "nicaragua": {
        "title": "Nicaragua",
        "include": ["nicaragua", "managua", "matagalpa", "chinandega"],
    },
    "turkmenistan": {
        "title": "Turkmenistan",
        "include": ["turkmenistan", "turkmenabat"],
    },
    "paraguay": {
        "title": "Paraguay",
        "include": ["paraguay", "asunción", "asuncion", "ciudad+del+este", "san+lorenzo", "luque", "capiata"],
    },
    "laos": {
        "title": "Laos",
        "include": ["laos", "vientiane", "pakse"],
    },
    "bulgaria": {
        "title": "Bulgaria",
        "include": ["bulgaria", "sofia", "plovdiv", "varna", "burgas", "ruse", "stara+zagora", "pleven"],
    },
    "lebanon": {
        "title": "Lebanon",
        "include": ["lebanon", "beirut", "sidon", "tyre", "tripoli", "byblos", "bekaa", "jounieh", "zahle", "baalbek", "nabatieh", "jbeil", "batroun", "achrafieh", "hamra"],
    },
    "libya": {
        "title": "Libya",
        "include": ["libya", "tripoli", "benghazi", "misrata", "zliten", "bayda"],
        "exclude": ["lebanon", "greece", "gr"],
    },
    "slovakia": {
        "title": "Slovakia",
        "include": ["slovakia", "bratislava", "kosice", "presov", "zilina"],
    },
    "slovenia": {
        "title": "Slovenia",
        "include": ["slovenia", "slovenija", "ljubljana", "maribor", "celje", "kranj", "koper", "velenje", "novo+mesto", "nova+gorica", "krsko", "krško", "murska+sobota", "postojna", "slovenj+gradec"],
    },
    "lithuania": {
        "title": "Lithuania",
        "include": ["lithuania", "vilnius", "kaunas", "klaipeda", "siauliai", "panevezys", "alytus"],
    },
    "uruguay": {
        "title": "Uruguay",
        "include": ["uruguay", "montevideo"],
    },
    "united states": {
        "title": "United States",
        "include": [",+US", "USA", "United+States", "Alabama", ",+AL", "Alaska", ",+AK", "Arizona", ",+AZ", "Arkansas", ",+AR", "California", ",+CA", "Colorado", ",+CO", "Connecticut", ",+CT", "Delaware", ",+DE", "Florida", ",+FL", "Georgia", ",+GA", "Hawaii", ",+HI", "Idaho", ",+ID", "Illinois", ",+IL", "Indiana", ",+IN", "Iowa", ",+IA", "Kansas", ",+KS", "Kentucky", ",+KY", "Louisiana", ",+LA", "Maine", ",+ME", "Maryland", ",+MD", "Massachusetts", ",+MA", "Michigan", ",+MI", "Minnesota", ",+MN", "Mississippi", ",+MS", "Missouri", ",+MO", "Montana", ",+MT", "Nebraska", ",+NE", "Nevada", ",+NV", "New+Hampshire", ",+NH", "New+Jersey", ",+NJ", "New+Mexico", ",+NM", "New+York", ",+NY", "North+Carolina", ",+NC", "North+Dakota", ",+ND", "Ohio", ",+OH", "Oklahoma", ",+OK", "Oregon", ",+OR", "Pennsylvania", ",+PA", "Rhode+Island", ",+RI", "South+Carolina", ",+SC", "South+Dakota", ",+SD", "Tennessee", ",+TN", "Texas", ",+TX", "Utah", ",+UT", "Vermont", ",+VT", "Virginia", ",+VA", "Washington", ",+WA", "West+Virginia", ",+WV", "Wisconsin", ",+WI", "Wyoming", ",+WY", "Los+Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia", "San+Antonio", "San+Diego", "Dallas", "San+Jose", "Austin", "Jacksonville", "Fort+Worth", "Columbus", "Charlotte", "San+Francisco", "Indianapolis", "Seattle", "Denver", "Boston", "El+Paso", "Nashville", "Detroit", "Portland", "Las+Vegas", "Memphis", "Louisville", "Baltimore"],
    },
    "macedonia": {
        "title": "North Macedonia",
        "include": ["macedonia", "fyrom", "north+macedonia", "mk", "mkd", "ohd", "skp", "skopje", "bitola", "kumanovo", "prilep", "tetovo", "veles", "shtip", "ohrid", "gostivar", "strumica", "kavadarci", "negotino", "berovo", "kratovo", "struga", "valandovo", "demir+kapija", "demir+hisar", "krusheve", "gevgelija"],
    },
    "palestine": {
        "title": "Palestine",
        "include": ["palestine", "jerusalem", "gaza", "hebron", "jenin", "nablus", "ramallah", "rafah"],
    },
    "mauritania": {
        "title": "Mauritania",
        "include": ["mauritania", "mauritanie", "nouakchott", "nouadhibou"],
    },
    "botswana": {
        "title": "Botswana",
        "include": ["botswana", "gaborone", "francistown"],
    },
    "iraq": {
        "title": "Iraq",
        "include": ["baghdad", "mosul", "basra", "kirkuk", "erbil", "najaf", "karbala", "sulaymaniya", "al-nasiriya", "al-amarah"],
    },
    "qatar": {
        "title": "Qatar",
        "include": ["Qatar", "Doha"],
    },
    "the bahamas": {
        "title": "The Bahamas",
        "include": ["Bahamas"],
    },
    "gabon": {
        "title": "Gabon",
        "include": ["gabon", "Libreville", "Port-gentil", "Franceville", "Oyem", "Moanda"],
    },
    "georgia": {
        "title": "Georgia",
        "include": ["Tbilisi", "Batumi", "Kutaisi", "Rustavi", "Zugdidi", "Gori", "Poti", "Telavi", "Akhaltsikhe", "Mtskheta", "Ozurgeti", "Sukhumi", "Samtredia", "Marneuli"],
    },
    "kosovo": {
        "title": "Kosovo",
        "include": ["kosovo", "kosove", "prishtine"],
    },
    "madagascar": {
        "title": "Madagascar",
        "include": ["madagascar", "antananarivo", "toamasina", "antsiranana", "mahajanga", "fianarantsoa", "toliara", "antsirabe", "ambositra", "ambatondrazaka", "manakara", "sambava", "morondava", "ambanja", "farafangana", "maintirano", "antsalova", "isoa", "mampikony", "ambatolampy", "ambatofinandrahana", "mandritsara", "marovoay", "moramanga", "vangaindrano", "soaindrana", "ikongo", "tamatave", "diego+suarez", "mananjary", "vohemar", "amparafaravola"],
    },
    "mauritius": {
        "title": "Mauritius",
        "include": ["mauritius", "port+louis", "curepipe", "quatre+bornes", "vacoas-phoenix", "vacoas", "beau-bassin-rose-hill", "beau+bassin", "rose+hill", "mahebourg", "goodlands", "triolet", "bel+air", "flacq", "souillac", "pamplemousses", "grand+baie", "ebene"],
    },
}


def preset(name):
    entry = PRESETS.get(name) or {}
    return {
        "title": entry.get("title", ""),
        "include": list(entry.get("include", [])),
        "exclude": list(entry.get("exclude", [])),
    }


def preset_title(name):
    return preset(name)["title"] or name.title()


def canonical(p):
    # same rendering the published checksums were computed over
    return "{title:%s include:[%s] exclude:[%s]}" % (
        p["title"],
        " ".join(p["include"]),
        " ".join(p["exclude"]),
    )


def preset_checksum(name):
    return hashlib.sha256(canonical(preset(name)).encode("utf-8")).hexdigest()
